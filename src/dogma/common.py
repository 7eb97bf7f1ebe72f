"""
Collection of shared utility classes and methods
"""
from collections.abc import Mapping


class AttrDict(dict):
    """
    Read-only view of config sections allowing ``cfg.display.spaced``
    """
    def __getattr__(self, attr):
        try:
            val = self[attr]
        except KeyError:
            raise AttributeError(f'{self} has no attribute {attr}') from None
        if isinstance(val, dict):
            return AttrDict(val)
        return val


class MixedTypeError(TypeError):
    """A config layer replaces a section with a value or vice versa

    Args:
      key: Dotted path of the conflicting entry
    """
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Mixed section and value at '{key}'")


def merge_layer(dst, src, path=()):
    """Merge config layer ``src`` into ``dst`` in place

    Sections (mappings) are merged key by key; any other value,
    including lists, replaces what was there. A section left empty
    (``None``) in ``src`` leaves the lower layer alone. Sections are
    copied, so ``dst`` never shares mappings with ``src``.

    Raises:
      MixedTypeError: if one layer has a section where the other has
        a plain value
    """
    for key, val in src.items():
        here = path + (key,)
        old = dst.get(key)
        if isinstance(val, Mapping):
            if old is None:
                old = dst[key] = {}
            elif not isinstance(old, Mapping):
                raise MixedTypeError(".".join(map(str, here)))
            merge_layer(old, val, here)
        elif isinstance(old, Mapping):
            if val is not None:
                raise MixedTypeError(".".join(map(str, here)))
        else:
            dst[key] = val
    return dst
