# © 2021-2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

import os, sys
import argparse
import unittest

if __name__ == '__main__':
    optpar = argparse.ArgumentParser(
        description='Run the unit tests of one *_test.py module.')
    optpar.add_argument('testscript', help='path to a *_test.py file')
    options = optpar.parse_args()
    testscript = options.testscript
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "py")
    sys.path.append(path)
    if not os.path.isfile(testscript):
        optpar.error('not a file: %r' % testscript)
    sys.path.append(os.path.dirname(testscript))
    base, ext = os.path.splitext(os.path.basename(testscript))
    if ext != '.py':
        optpar.error('file name does not end with .py: %r' % testscript)
    unittest.main(module = base, argv = [""])
