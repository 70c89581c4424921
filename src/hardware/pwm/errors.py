"""
PWM sink errors

InitializationFailure is fatal at startup. WriteFailure is per-call and never
propagated out of the fade tick or the manual channel. ShutdownFailure is
logged and does not block termination.
"""


class PwmSinkError(RuntimeError):
    """Base class for PWM sink failures"""


class InitializationFailure(PwmSinkError):
    """PWM driver could not be initialized (permission denied, daemon not running, ...)"""


class WriteFailure(PwmSinkError):
    """Single duty cycle write failed"""


class ShutdownFailure(PwmSinkError):
    """PWM driver could not be released"""
