from importlib.metadata import version
import nucpack


def test_version():
    """
    Check if the version of the package matches the installed
    distribution.
    """
    assert nucpack.__version__ == version("nucpack")
