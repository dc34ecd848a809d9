"""
Codecs for 8-bit character sets, registered with the :mod:`codecs` module.

Importing :mod:`forbidden_bands` registers a search function, after which
``bytes.decode('petscii')`` and ``str.encode('petscii')`` work.  Each module
of this package that provides ``getregentry()`` is one encoding, named after
the module, with optional ``getaliases()``.
"""

# std imports
import codecs
import importlib
from typing import Dict, Optional

_cache: Dict[str, Optional[codecs.CodecInfo]] = {}
_aliases: Dict[str, str] = {}

#: encoding module names, loaded to know their aliases
ENCODINGS = ('petscii',)


def _load(name: str) -> Optional[codecs.CodecInfo]:
    if name in _cache:
        return _cache[name]
    try:
        mod = importlib.import_module(f".{name}", package=__name__)
    except ImportError:
        _cache[name] = None
        return None

    try:
        info: codecs.CodecInfo = mod.getregentry()
    except AttributeError:
        _cache[name] = None
        return None

    _cache[name] = info
    for alias in getattr(mod, "getaliases", tuple)():
        _aliases[alias] = name
    return info


def _search_function(encoding: str) -> Optional[codecs.CodecInfo]:
    """Codec search function registered with codecs.register()."""
    normalized = encoding.lower().replace("-", "_")

    if normalized in _aliases:
        return _load(_aliases[normalized])
    if normalized in ENCODINGS:
        return _load(normalized)
    return None


for _name in ENCODINGS:
    _load(_name)

codecs.register(_search_function)
