#! /usr/bin/env python3
#-*- coding:utf-8 -*-

import unittest

from parameterized import parameterized

from mcrdis.arch.arm.mcr import (
    op1, ldop, crn, rd, cpnum, op2, crm, all_fields,
    MASK_MCR_MRC, BITS_MCR_MRC, MASK_OP1_CRM_OP2_CRN,
    is_mcr_or_mrc, cp_key, instruction_mr,
)


class TestMcrFields(unittest.TestCase):

    @parameterized.expand([
        ("op1", op1, 3, 21),
        ("ldop", ldop, 1, 20),
        ("crn", crn, 4, 16),
        ("rd", rd, 4, 12),
        ("cpnum", cpnum, 4, 8),
        ("op2", op2, 3, 5),
        ("crm", crm, 4, 0),
    ])
    def test_layout(self, _, field, l, offset):
        self.assertEqual(field.l, l)
        self.assertEqual(field.offset, offset)

    def test_fields_cover_operands(self):
        covered = 0
        for field in all_fields:
            self.assertEqual(covered & field.mask_in_reg, 0)
            covered |= field.mask_in_reg
        # cond, bits 24-27 and bit 4 are left out
        self.assertEqual(covered, 0x00FFFFEF)

    def test_masks(self):
        self.assertEqual(MASK_MCR_MRC, 0x0F000F00)
        self.assertEqual(BITS_MCR_MRC, 0x0E000F00)
        self.assertEqual(MASK_OP1_CRM_OP2_CRN, 0x00EF00EF)

    def test_cp_key(self):
        self.assertEqual(cp_key(6, 0, 1, 2), 0x00060041)
        self.assertEqual(cp_key(6, 0, 1, 2), 0xee061f51 & MASK_OP1_CRM_OP2_CRN)
        self.assertEqual(cp_key(0, 0, 0, 0), 0)
        self.assertEqual(cp_key(15, 7, 15, 7), MASK_OP1_CRM_OP2_CRN)


class TestMcrClassification(unittest.TestCase):

    @parameterized.expand([
        ("mcr", 0xee011f10, True),
        ("mrc", 0xee100f10, True),
        ("pattern_only", 0x0e000f00, True),
        ("zero", 0x00000000, False),
        ("all_ones", 0xFFFFFFFF, False),
        ("svc", 0xef000f00, False),
        ("cp14", 0xee000e15, False),
        ("mov", 0xe1a0100e, False),
        ("bits_24_27_only", 0x0e000000, False),
        ("bits_8_11_only", 0x00000f00, False),
    ])
    def test_is_mcr_or_mrc(self, _, opcode, expected):
        self.assertEqual(is_mcr_or_mrc(opcode), expected)

    def test_forced_bits_classify(self):
        for value in (0, 0xFFFFFFFF, 0x12345678, 0xdeadbeef, 0xf1e2d3c4,
                      0x00100010, 0x80000001):
            opcode = (value & ~MASK_MCR_MRC) | BITS_MCR_MRC
            self.assertTrue(is_mcr_or_mrc(opcode), hex(opcode))

    def test_any_other_fixed_bits_fail(self):
        for bit in range(32):
            if not (1 << bit) & MASK_MCR_MRC:
                continue
            opcode = 0xee011f10 ^ (1 << bit)
            self.assertFalse(is_mcr_or_mrc(opcode), hex(opcode))


class TestMcrInstruction(unittest.TestCase):

    def test_mcr(self):
        instr = instruction_mr.dis(0xee011f10)
        self.assertEqual(instr.name, "MCR")
        self.assertEqual(instr.ldop, 0)
        self.assertEqual(instr.cpnum, 15)
        self.assertEqual(instr.op1, 0)
        self.assertEqual(instr.rd, 1)
        self.assertEqual(instr.crn, 1)
        self.assertEqual(instr.crm, 0)
        self.assertEqual(instr.op2, 0)
        self.assertEqual(instr.to_string(), "MCR, 15, 0, r1, cr1, cr0, {0}")
        self.assertEqual(instr.to_fields_string(),
                         "MCR, CRn=1 Op1=0 CRm=0 Op2=0 Rd=1 CP=15")
        self.assertEqual(str(instr), instr.to_string())

    def test_mrc(self):
        instr = instruction_mr.dis(0xee100f10)
        self.assertEqual(instr.name, "MRC")
        self.assertEqual(instr.to_string(), "MRC, 15, 0, r0, cr0, cr0, {0}")
        self.assertEqual(instr.key, 0)

    def test_all_fields(self):
        instr = instruction_mr.dis(0xeef5cf7b)
        self.assertEqual(instr.name, "MRC")
        self.assertEqual(instr.op1, 7)
        self.assertEqual(instr.crn, 5)
        self.assertEqual(instr.rd, 12)
        self.assertEqual(instr.cpnum, 15)
        self.assertEqual(instr.op2, 3)
        self.assertEqual(instr.crm, 11)
        self.assertEqual(instr.to_fields_string(),
                         "MRC, CRn=5 Op1=7 CRm=11 Op2=3 Rd=12 CP=15")

    def test_mpu_rse(self):
        instr = instruction_mr.dis(0xee061f51)
        self.assertEqual((instr.crn, instr.op1, instr.crm, instr.op2),
                         (6, 0, 1, 2))
        self.assertEqual(instr.key, cp_key(6, 0, 1, 2))

    def test_not_mcr(self):
        self.assertIsNone(instruction_mr.dis(0))
        self.assertIsNone(instruction_mr.dis(0xee000e15))

    def test_repr(self):
        self.assertEqual(repr(instruction_mr(0xee011f10)),
                         "<instruction_mr ee011f10>")


if __name__ == '__main__':
    loader = unittest.TestLoader()
    testsuite = unittest.TestSuite()
    for case in (TestMcrFields, TestMcrClassification, TestMcrInstruction):
        testsuite.addTests(loader.loadTestsFromTestCase(case))
    report = unittest.TextTestRunner(verbosity=2).run(testsuite)
    exit(len(report.errors + report.failures))
