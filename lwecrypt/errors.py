# lwecrypt/errors.py
# Parameter and input errors. All are ValueErrors so plain `except ValueError`
# callers keep working.

class LWEError(ValueError):
    pass

class InvalidDimensionError(LWEError):
    pass

class ModulusTooSmallError(LWEError):
    pass

class ModulusNotPrimeError(LWEError):
    pass

class InvalidMessageError(LWEError):
    pass

class LengthMismatchError(LWEError):
    pass

class InvalidSampleParameterError(LWEError):
    pass

class InvalidRangeError(LWEError):
    pass

class SamplingError(LWEError):
    """Rejection sampler ran out of attempts."""

class SerializationError(LWEError):
    pass

class KeystoreError(LWEError):
    pass
