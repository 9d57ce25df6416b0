class DexScreenerError(Exception):
    pass


class DexScreenerHttpError(DexScreenerError):
    pass


class DexScreenerDecodeError(DexScreenerError):
    pass
