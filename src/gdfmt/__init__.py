"""gdfmt: command-line front end for GDScript formatting.

Feeds source text into a formatting engine and writes the result back
in place, to stdout, or only reports whether the input is formatted.
"""

from gdfmt.version import __version__

__all__: list[str] = ["__version__"]
