#! /usr/bin/env python3
#-*- coding:utf-8 -*-

import unittest

from parameterized import parameterized

from mcrdis.core.bitfield import bf, bf_pattern, pack, extract, mask_in_reg


class TestBitField(unittest.TestCase):

    def test_pack_extract(self):
        crn = bf(l=4, offset=16, fname='crn')
        self.assertEqual(crn.lmask, 0xF)
        self.assertEqual(crn.mask_in_reg, 0x000F0000)
        self.assertEqual(crn.pack(6), 0x00060000)
        self.assertEqual(crn.extract(0xee061f51), 6)
        self.assertEqual(pack(crn, 6), crn.pack(6))
        self.assertEqual(extract(crn, 0xee061f51), 6)

    def test_pack_drops_high_bits(self):
        op2 = bf(l=3, offset=5, fname='op2')
        self.assertEqual(op2.pack(0xF), 7 << 5)
        self.assertEqual(op2.pack(8), 0)

    def test_extract_range(self):
        op1 = bf(l=3, offset=21, fname='op1')
        self.assertEqual(op1.extract(0xFFFFFFFF), 7)
        self.assertEqual(op1.extract(0), 0)

    @parameterized.expand([
        ("l1", 1, 20),
        ("l3", 3, 5),
        ("l4_lsb", 4, 0),
        ("l4", 4, 12),
    ])
    def test_extract_pack_masks_value(self, _, l, offset):
        field = bf(l=l, offset=offset, fname='f')
        for value in (0, 1, field.lmask, field.lmask + 1, 0x1234, 0xFFFFFFFF):
            self.assertEqual(field.extract(field.pack(value)),
                             value & field.lmask)

    def test_mask_in_reg(self):
        fields = [bf(l=3, offset=21, fname='op1'),
                  bf(l=4, offset=16, fname='crn'),
                  bf(l=3, offset=5, fname='op2'),
                  bf(l=4, offset=0, fname='crm')]
        self.assertEqual(mask_in_reg(*fields), 0x00EF00EF)
        self.assertEqual(mask_in_reg(), 0)

    def test_repr(self):
        self.assertEqual(repr(bf(l=4, offset=8, fname='cpnum')),
                         "bf_cpnum_4_8")


class TestBitPattern(unittest.TestCase):

    def test_masks(self):
        pattern = bf_pattern("XXXX 1110 XXXX XXXX XXXX 1111 XXXX XXXX")
        self.assertEqual(pattern.l, 32)
        self.assertEqual(pattern.fmask, 0x0F000F00)
        self.assertEqual(pattern.fbits, 0x0E000F00)

    def test_check_fbits(self):
        pattern = bf_pattern("XXXX 1110 XXXX XXXX XXXX XXXX XXX0 XXXX")
        self.assertTrue(pattern.check_fbits(0xee000e00))
        self.assertFalse(pattern.check_fbits(0xee000e10))
        self.assertFalse(pattern.check_fbits(0xef000e00))

    def test_no_fixed_bits(self):
        pattern = bf_pattern("XXXX")
        self.assertEqual(pattern.fmask, 0)
        self.assertTrue(pattern.check_fbits(0xF))


if __name__ == '__main__':
    testsuite = unittest.TestLoader().loadTestsFromTestCase(TestBitField)
    testsuite.addTests(unittest.TestLoader().loadTestsFromTestCase(TestBitPattern))
    report = unittest.TextTestRunner(verbosity=2).run(testsuite)
    exit(len(report.errors + report.failures))
