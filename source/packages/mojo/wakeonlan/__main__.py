"""
.. module:: __main__
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Allows the package to be run with 'python -m mojo.wakeonlan'.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []

import sys

from mojo.wakeonlan.cli import main

if __name__ == "__main__":
    sys.exit(main())
