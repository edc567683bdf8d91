"""
SwipeType Swipe Module

Gesture bookkeeping and background decoding using PyQt5.
"""
from .context import SwipeContext
from .handler import SwipeGestureHandler
from .worker import DecodeRequest, DecodeWorker

__all__ = [
    'SwipeContext',
    'SwipeGestureHandler',
    'DecodeRequest',
    'DecodeWorker',
]
