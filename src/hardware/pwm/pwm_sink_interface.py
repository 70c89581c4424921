from typing import Protocol, Dict
from models.enums import LedChannel

class IPwmSink(Protocol):

    # -------------------------------
    # Lifecycle
    # -------------------------------

    def initialize(self) -> None:
        """
        Open the PWM driver and configure all channel pins as outputs.

        Must be called before any write().

        Raises:
            InitializationFailure: If the driver cannot be opened
        """
        ...

    def cleanup(self) -> None:
        """
        Release the PWM driver.

        Raises:
            ShutdownFailure: If the driver cannot be released
        """
        ...


    # -------------------------------
    # IO
    # -------------------------------

    def write(self, channel: LedChannel, value: int) -> None:
        """
        Write duty cycle (0-255) to channel

        Raises:
            WriteFailure: If the write did not reach the driver
        """
        ...


    # -------------------------------
    # Debug
    # -------------------------------

    @property
    def channels(self) -> Dict[LedChannel, int]:
        """Channel -> BCM pin mapping"""
        ...
