"""
Planner core - portable across UI front ends.

Remote catalog cache, grid ownership, clipboard, link parsing and the
pattern ring layout. No UI framework dependencies.
"""
from .data_models import Backdrop, BackdropHex, Cell, ModelVariant, PatternVariant, normalize_gift_name
from .exceptions import (
    PlannerError, RemoteFetchError, TransportFailure, HttpStatusFailure, DecodeFailure, OutOfRangeError
)
from .session_store import SessionStore, FileSessionStore
from .remote_cache import RemoteDataCache, Success, Exhausted, cache_key_for
from .attribute_cache import AttributeCache
from .grid_model import GridModel, GridPosition
from .clipboard import CellClipboard
from .link_parser import parse_link
from .pattern_rings import PatternRings, RingLayout, RingPlacement, compute_ring_layout
from .cell_editor import CellEditor
from .planner import GiftPlanner

__all__ = [
    'Backdrop',
    'BackdropHex',
    'Cell',
    'ModelVariant',
    'PatternVariant',
    'normalize_gift_name',
    'PlannerError',
    'RemoteFetchError',
    'TransportFailure',
    'HttpStatusFailure',
    'DecodeFailure',
    'OutOfRangeError',
    'SessionStore',
    'FileSessionStore',
    'RemoteDataCache',
    'Success',
    'Exhausted',
    'cache_key_for',
    'AttributeCache',
    'GridModel',
    'GridPosition',
    'CellClipboard',
    'parse_link',
    'PatternRings',
    'RingLayout',
    'RingPlacement',
    'compute_ring_layout',
    'CellEditor',
    'GiftPlanner'
]
