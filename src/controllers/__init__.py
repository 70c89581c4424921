from .manual_channel import ManualChannel

__all__ = [
    'ManualChannel',
]
