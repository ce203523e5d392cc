"""Auto-discovery of colour mode modules.

Every .py file in this package that defines a `strategy` object is
auto-registered by compare_table.registry.discover().

The explicit imports below keep frozen builds (PyInstaller) working.
Without them, pkgutil.iter_modules cannot find the mode files at runtime.
"""

# PyInstaller hidden imports: keep this list in sync with mode modules
import compare_table.modes.binary as _binary  # noqa: F401
import compare_table.modes.linear as _linear  # noqa: F401
