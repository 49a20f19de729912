import unittest
import os


slow_test = unittest.skipUnless(
    os.getenv('TEST_SLOW'),
    'Skipping slow test unless TEST_SLOW is set')
