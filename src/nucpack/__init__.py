# This source code is part of the nucpack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *nucpack*.
The functionality is located in the :mod:`nucpack.sequence` subpackage,
the ``nuccount`` command line program is implemented in
:mod:`nucpack.nuccount`.
"""

__version__ = "0.1.0"
__name__ = "nucpack"
__author__ = "nucpack contributors"
