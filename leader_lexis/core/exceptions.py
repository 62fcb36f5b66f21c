class LeaderLexisError(Exception):
    """Base exception for all leader_lexis errors"""
    pass

class ConfigError(LeaderLexisError):
    """Invalid or missing global.json / data path configuration"""
    pass

class DatasetSchemaError(LeaderLexisError):
    """
    Leader CSV doesn't match what the loader expects
    missing required columns, no recognised country-group columns, etc
    """
    pass

class DataIntegrityError(LeaderLexisError):
    """
    Programming defect in the data or state: treated as fatal for the
    current operation and surfaced to the caller
    """
    pass

class DuplicateLeaderError(DataIntegrityError):
    """Two records share the same identifier"""
    pass

class UnknownLeaderError(DataIntegrityError, KeyError):
    """An identifier with no matching record in the Dataset"""
    pass

class InvariantViolation(DataIntegrityError):
    """A candidate FilterState selects leaders outside the active filters"""
    pass

class InvalidIntentError(LeaderLexisError, ValueError):
    """Malformed intent or unknown country-group key"""
    pass
