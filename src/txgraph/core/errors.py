class TxGraphError(Exception):
    pass


class FetchError(TxGraphError):
    pass
