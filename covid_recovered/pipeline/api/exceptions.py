class FetchError(Exception):
    """Base class for every failure while fetching a recovered count."""


class TransportError(FetchError):
    """Network failure, timeout, non-2xx status or a body that is not JSON."""


class MalformedResponseError(FetchError):
    """The JSON body does not have the expected shape."""


class NoDataError(FetchError):
    """No record for the source, or the record has no recovered count."""
