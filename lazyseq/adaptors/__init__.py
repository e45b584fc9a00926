"""
lazyseq Adaptors
================

Lazy pipeline stages. Each adaptor owns exactly one upstream sequence (two for
chain and zip) and pulls from it only when it is itself advanced.
"""

from .base import Adaptor
from .bounded import CallCounter, SkipWhileAdaptor, TakeWhileAdaptor
from .combine import ChainAdaptor, FlattenAdaptor, ZipAdaptor
from .peekable import Lookahead, PeekableAdaptor
from .restart import CycleAdaptor
from .reverse import ReversedAdaptor
from .stride import IntersperseAdaptor, SeparatorValue, StepByAdaptor
from .transform import FilterAdaptor, FilterMapAdaptor, InspectAdaptor, MapAdaptor

__all__ = [
    "Adaptor",
    "CallCounter",
    "ChainAdaptor",
    "CycleAdaptor",
    "FilterAdaptor",
    "FilterMapAdaptor",
    "FlattenAdaptor",
    "InspectAdaptor",
    "IntersperseAdaptor",
    "Lookahead",
    "MapAdaptor",
    "PeekableAdaptor",
    "ReversedAdaptor",
    "SeparatorValue",
    "SkipWhileAdaptor",
    "StepByAdaptor",
    "TakeWhileAdaptor",
    "ZipAdaptor",
]
