class HuffmanFormatError(ValueError):
    """Base class for every malformed-input error raised by the codec."""


class TruncatedHeader(HuffmanFormatError):
    pass


class InvalidSymbolCount(HuffmanFormatError):
    pass


class InvalidCodeTable(HuffmanFormatError):
    """Header lengths do not describe a usable prefix code."""


class ReservedByteInInput(HuffmanFormatError):
    pass


class UnterminatedPayload(HuffmanFormatError):
    pass


class CorruptPayload(HuffmanFormatError):
    pass
