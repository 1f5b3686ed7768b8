from . import public, base
