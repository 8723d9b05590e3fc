#-*- coding:utf-8 -*-

from mcrdis.core.bitfield import bf, bf_pattern, mask_in_reg

# A1 encoding
#
# 31   27   23   19   15   11   7    3
# cond 1110 opc1 CR_n R__d 1111 opc2 CR_m
#           ---L           ---- ---1
#
# Bits 8-11 double as the coprocessor number field: the pattern only
# accepts p15.

op1 = bf(l=3, offset=21, fname='op1')
ldop = bf(l=1, offset=20, fname='ldop')
crn = bf(l=4, offset=16, fname='crn')
rd = bf(l=4, offset=12, fname='rd')
cpnum = bf(l=4, offset=8, fname='cpnum')
op2 = bf(l=3, offset=5, fname='op2')
crm = bf(l=4, offset=0, fname='crm')

all_fields = [op1, ldop, crn, rd, cpnum, op2, crm]

mr_pattern = bf_pattern("XXXX 1110 XXXX XXXX XXXX 1111 XXXX XXXX")

MASK_MCR_MRC = mr_pattern.fmask
BITS_MCR_MRC = mr_pattern.fbits

# Naming fields only: direction, Rd and coprocessor number are ignored
MASK_OP1_CRM_OP2_CRN = mask_in_reg(op1, crm, op2, crn)

mr_name = {'MCR': 0, 'MRC': 1}
mr_name_inv = dict((v, k) for k, v in mr_name.items())


def is_mcr_or_mrc(opcode):
    return mr_pattern.check_fbits(opcode)


def cp_key(crn_v, op1_v, crm_v, op2_v):
    """Return the positioned naming-field key of a coprocessor register"""
    return (crn.pack(crn_v) | op1.pack(op1_v) |
            crm.pack(crm_v) | op2.pack(op2_v))


class instruction_mr(object):
    """Fields of a decoded MCR/MRC opcode"""

    __slots__ = ["opcode", "op1", "ldop", "crn", "rd", "cpnum", "op2", "crm"]

    def __init__(self, opcode):
        self.opcode = opcode
        for field in all_fields:
            setattr(self, field.fname, field.extract(opcode))

    @classmethod
    def dis(cls, opcode):
        """Return an instruction_mr for @opcode, None if it is no MCR/MRC"""
        if not is_mcr_or_mrc(opcode):
            return None
        return cls(opcode)

    @property
    def name(self):
        return mr_name_inv[self.ldop]

    @property
    def key(self):
        return self.opcode & MASK_OP1_CRM_OP2_CRN

    def to_string(self):
        return "%s, %d, %d, r%d, cr%d, cr%d, {%d}" % (
            self.name, self.cpnum, self.op1, self.rd,
            self.crn, self.crm, self.op2
        )

    def to_fields_string(self):
        return "%s, CRn=%d Op1=%d CRm=%d Op2=%d Rd=%d CP=%d" % (
            self.name, self.crn, self.op1, self.crm,
            self.op2, self.rd, self.cpnum
        )

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return "<%s %08x>" % (self.__class__.__name__, self.opcode)
