"Test suite for :mod:`textcell`.  Run with ``python3 -m unittest discover textcell.tests``"
