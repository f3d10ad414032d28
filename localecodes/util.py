import os

DATA_ROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')


def data_filename(filename):
    """
    Get the full path to a data file that ships with this package.
    """
    return os.path.join(DATA_ROOT, filename)
