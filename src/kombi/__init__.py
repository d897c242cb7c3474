"""kombi: generic function combinators.

Build pipelines from small unary functions instead of nested calls:
application, composition, effectful composition over logs, optionals and
multiplicities, single-type composition, and arity adapters that let
multi-argument functions join in.

Flat imports (preferred):
    from kombi import pipe, compose, compose_logged, curry2, flip, map_over
    from kombi import Fn, Logged, Maybe, Many

Submodule imports (for organization):
    from kombi.effects import compose_optional
    from kombi.arity import uncurry2, zurry
    from kombi.ops import Fn
    from kombi.runtime import init
"""

# Application
from kombi.apply import pipe, pipe_mut

# Arity adapters
from kombi.arity import curry2, curry3, flip, flip_nullary, unbound, uncurry2, zurry

# Composition
from kombi.compose import compose, flow, identity

# Decorators
from kombi.decorators import traced

# Effectful composition
from kombi.effects import (
    compose_logged,
    compose_many,
    compose_optional,
    first,
    logged,
    logged_unit,
    many_unit,
    second,
    tell,
)

# Errors
from kombi.errors import KombiError, LogShapeError, NotCallableError

# Collection lifters
from kombi.lift import filter_by, map_over, reduce_with

# Operator syntax
from kombi.ops import Endo, Fn, Logged, Many, Maybe, Mut, Sink
from kombi.ref import Ref

# Single-type composition
from kombi.single import concat_effects, concat_endo, concat_mut

__all__ = [
    # Operator syntax
    'Endo',
    'Fn',
    # Errors
    'KombiError',
    'LogShapeError',
    'Logged',
    'Many',
    'Maybe',
    'Mut',
    'NotCallableError',
    'Ref',
    'Sink',
    # Composition
    'compose',
    'compose_logged',
    'compose_many',
    'compose_optional',
    # Single-type composition
    'concat_effects',
    'concat_endo',
    'concat_mut',
    # Arity adapters
    'curry2',
    'curry3',
    # Collection lifters
    'filter_by',
    'first',
    'flip',
    'flip_nullary',
    'flow',
    'identity',
    'logged',
    'logged_unit',
    'many_unit',
    'map_over',
    # Application
    'pipe',
    'pipe_mut',
    'reduce_with',
    'second',
    'tell',
    # Decorators
    'traced',
    'unbound',
    'uncurry2',
    'zurry',
]
