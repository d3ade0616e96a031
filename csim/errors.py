class CsimError(Exception):
    pass


class ConfigError(CsimError):
    """Invalid cache geometry or unusable trace source."""


class TraceError(CsimError):
    """Malformed record in a trace file."""
