#-*- coding:utf-8 -*-

from mcrdis.arch.arm.mcr import cp_key, MASK_OP1_CRM_OP2_CRN

ISA_CORTEX_A9 = 1 << 0
ISA_CORTEX_A15 = 1 << 1
ISA_CORTEX_R4 = 1 << 2
ISA_ALL = 0xFFFFFFFF

isa_names = {
    "cortex-a9": ISA_CORTEX_A9,
    "cortex-a15": ISA_CORTEX_A15,
    "cortex-r4": ISA_CORTEX_R4,
}


def isa_mask_from_names(names):
    """
    Return the ISA mask selecting every core of @names
    @names: iterable of keys of isa_names (case insensitive)
    """
    mask = 0
    for name in names:
        key = name.lower()
        if key not in isa_names:
            raise ValueError("Unknown ISA %r (expected one of: %s)" % (
                name, ", ".join(sorted(isa_names))))
        mask |= isa_names[key]
    return mask


class reg_desc(object):
    """
    Coprocessor register description.

    @mask: naming-field key (see mcr.cp_key)
    @name: register mnemonic, None if unknown
    @comment: human readable description, None if unknown
    @isa_mask: cores on which the description applies
    """

    __slots__ = ["_mask", "_name", "_comment", "_isa_mask"]

    def __init__(self, mask, name, comment, isa_mask):
        assert mask & ~MASK_OP1_CRM_OP2_CRN == 0
        self._mask = mask
        self._name = name
        self._comment = comment
        self._isa_mask = isa_mask

    mask = property(lambda self: self._mask)
    name = property(lambda self: self._name)
    comment = property(lambda self: self._comment)
    isa_mask = property(lambda self: self._isa_mask)

    def applies_to(self, isa_mask):
        return bool(self.isa_mask & isa_mask)

    def __repr__(self):
        return "<%s %s 0x%08x isa=0x%x>" % (self.__class__.__name__,
                                            self.name, self.mask,
                                            self.isa_mask)


def rdesc_all(mask, name, comment):
    return reg_desc(mask, name, comment, ISA_ALL)


def rdesc_a15(mask, name, comment):
    return reg_desc(mask, name, comment, ISA_CORTEX_A15)


def rdesc_cr4(mask, name, comment):
    return reg_desc(mask, name, comment, ISA_CORTEX_R4)


# Keys are listed as (CRn, Op1, CRm, Op2). Declaration order is the lookup
# output order.
reg_descs = (
    # c0
    rdesc_all(cp_key(0, 0, 0, 0), "MIDR", "Main ID Register"),
    rdesc_all(cp_key(0, 0, 0, 1), "CTR", "Cache Type Register"),
    rdesc_all(cp_key(0, 0, 0, 2), "TCMTR", "TCM Type Register"),
    rdesc_all(cp_key(0, 0, 0, 3), "TLBTR", "TLB Type Register"),
    rdesc_all(cp_key(0, 0, 0, 5), "MPIDR", "Multiprocessor Affinity Register"),
    rdesc_a15(cp_key(0, 0, 0, 6), "REVIDR", "Revision ID Register"),

    rdesc_all(cp_key(0, 0, 1, 0), "ID_PFR0", "Processor Feature Register 0"),
    rdesc_all(cp_key(0, 0, 1, 1), "ID_PFR1", "Processor Feature Register 1"),
    rdesc_all(cp_key(0, 0, 1, 2), "ID_DFR0", "Debug Feature Register 0"),
    rdesc_all(cp_key(0, 0, 1, 3), "ID_AFR0", "Auiliary Feature Register 0"),
    rdesc_all(cp_key(0, 0, 1, 4), "ID_MMFR0", "Memory Model Feature Register 0"),
    rdesc_all(cp_key(0, 0, 1, 5), "ID_MMFR1", "Memory Model Feature Register 1"),
    rdesc_all(cp_key(0, 0, 1, 6), "ID_MMFR2", "Memory Model Feature Register 2"),
    rdesc_all(cp_key(0, 0, 1, 7), "ID_MMFR3", "Memory Model Feature Register 3"),

    rdesc_all(cp_key(0, 0, 2, 0), "ID_ISAR0", "Instruction Set Attributes Register 0"),
    rdesc_all(cp_key(0, 0, 2, 1), "ID_ISAR1", "Instruction Set Attributes Register 1"),
    rdesc_all(cp_key(0, 0, 2, 2), "ID_ISAR2", "Instruction Set Attributes Register 2"),
    rdesc_all(cp_key(0, 0, 2, 3), "ID_ISAR3", "Instruction Set Attributes Register 3"),
    rdesc_all(cp_key(0, 0, 2, 4), "ID_ISAR4", "Instruction Set Attributes Register 4"),
    rdesc_all(cp_key(0, 0, 2, 5), "ID_ISAR5", "Instruction Set Attributes Register 5"),

    rdesc_a15(cp_key(0, 1, 2, 0), "CCSIDR", "Current Cache Size ID"),
    rdesc_a15(cp_key(0, 1, 2, 1), "CLIDR", "Current Cache Level ID"),
    rdesc_a15(cp_key(0, 1, 2, 7), "AIDR", None),
    rdesc_a15(cp_key(0, 2, 0, 0), "CSSELR", "Cache Size Selection"),

    rdesc_a15(cp_key(0, 4, 0, 0), "VPIDR", None),
    rdesc_a15(cp_key(0, 4, 0, 5), "VMPIDR", None),

    # c1
    rdesc_all(cp_key(1, 0, 0, 0), "SCTLR", "System Control Register"),
    rdesc_all(cp_key(1, 0, 0, 1), "ACTLR", "Auxiliary Control Register"),
    rdesc_all(cp_key(1, 0, 0, 2), "CPACR", "Coprocessor Access Control Register"),

    rdesc_a15(cp_key(1, 0, 1, 0), "SCR", None),
    rdesc_a15(cp_key(1, 0, 1, 1), "SDER", None),
    rdesc_a15(cp_key(1, 0, 1, 2), "NSACR", None),
    rdesc_a15(cp_key(1, 0, 1, 3), "VCR", None),

    rdesc_a15(cp_key(1, 4, 0, 0), "HSCTLR", None),
    rdesc_a15(cp_key(1, 4, 0, 1), "HACTLR", None),

    rdesc_a15(cp_key(1, 4, 1, 0), "HCR", "Hypervisor Control Register"),
    rdesc_a15(cp_key(1, 4, 1, 1), "HDCR", None),
    rdesc_a15(cp_key(1, 4, 1, 2), "HCPTR", None),
    rdesc_a15(cp_key(1, 4, 1, 3), "HSTR", None),
    rdesc_a15(cp_key(1, 4, 1, 7), "HACR", "Hypervisor AUX Control Register"),

    # c2
    rdesc_a15(cp_key(2, 0, 0, 0), "TTBR0", "Translation Table Base Register 0"),
    rdesc_a15(cp_key(2, 0, 0, 1), "TTBR1", "Translation Table Base Register 1"),
    rdesc_a15(cp_key(2, 0, 0, 2), "TTBCR", "Translation Table Base Control Register"),

    rdesc_a15(cp_key(2, 4, 0, 2), "HTCR", None),
    rdesc_a15(cp_key(2, 4, 1, 2), "VTCR", None),

    # c3
    rdesc_a15(cp_key(3, 0, 0, 0), "DACR", None),

    # c5
    rdesc_all(cp_key(5, 0, 0, 0), "DFSR", "Data Fault Status Register"),
    rdesc_all(cp_key(5, 0, 0, 1), "IFSR", "Instruction Fault Status Register"),

    rdesc_a15(cp_key(5, 0, 1, 0), "ADFSR", "Auxiliary Data Fault Status Register"),
    rdesc_a15(cp_key(5, 0, 1, 1), "AIFSR", "Auxiliary Instruction Fault Status Register"),

    rdesc_a15(cp_key(5, 4, 1, 0), "HADFSR", "Hypervisor Auxiliary Data Fault Status Register"),
    rdesc_a15(cp_key(5, 4, 1, 0), "HAIFSR", "Hypervisor Auxiliary Instruction Fault Status Register"),
    rdesc_a15(cp_key(5, 4, 2, 0), "HSR", None),

    # c6
    rdesc_all(cp_key(6, 0, 0, 0), "DFAR", "Data Fault Address Register"),
    rdesc_all(cp_key(6, 0, 0, 2), "IFAR", "Instruction Fault Address Register"),

    rdesc_a15(cp_key(6, 4, 0, 0), "HDFAR", "Hypervisor Data Fault Address Register"),
    rdesc_a15(cp_key(6, 4, 0, 2), "HIFAR", "Hypervisor Instruction Fault Address Register"),
    rdesc_a15(cp_key(6, 4, 0, 4), "HPFAR", None),

    rdesc_cr4(cp_key(6, 0, 1, 0), "MPU BAR", "MPU Base Address Register"),
    rdesc_cr4(cp_key(6, 0, 1, 2), "MPU RSE", "MPU Region Size and Enable"),
    rdesc_cr4(cp_key(6, 0, 1, 4), "MPU RAC", "MPU Region Access Control"),

    rdesc_cr4(cp_key(6, 0, 2, 0), "MPU RN", "MPU Memory Region Number"),

    # c7
    rdesc_a15(cp_key(7, 0, 0, 0), "Reserved", None),
    rdesc_a15(cp_key(7, 0, 0, 1), "Reserved", None),
    rdesc_a15(cp_key(7, 0, 0, 2), "Reserved", None),
    rdesc_a15(cp_key(7, 0, 0, 3), "Reserved", None),
    rdesc_a15(cp_key(7, 0, 0, 4), "NOP", None),

    rdesc_a15(cp_key(7, 0, 1, 0), "ICIALLUIS", None),
    rdesc_a15(cp_key(7, 0, 1, 6), "BPIALLIS", None),
    rdesc_a15(cp_key(7, 0, 1, 7), "Reserved", None),

    rdesc_a15(cp_key(7, 0, 4, 0), "PAR", None),

    rdesc_all(cp_key(7, 0, 5, 0), "ICIALLU", "Invalidate Instruction Cache"),
    rdesc_all(cp_key(7, 0, 5, 1), "ICIMVAU", "Invalidate Instruction Cache by MVA"),
    rdesc_a15(cp_key(7, 0, 5, 2), "Reserved", None),
    rdesc_a15(cp_key(7, 0, 5, 3), "Reserved", None),
    rdesc_a15(cp_key(7, 0, 5, 4), "ISB", "Instruction Sync Barrier"),
    rdesc_cr4(cp_key(7, 0, 5, 4), "FlushPrefetch", "Flush Prefetch Buffer"),
    rdesc_all(cp_key(7, 0, 5, 6), "BPIALL", "Invalidate Entire Branch Predictor Array"),

    rdesc_a15(cp_key(7, 0, 6, 6), "DCIMVAC", None),
    rdesc_a15(cp_key(7, 0, 6, 2), "DCISW", "Invalidate Data Cache by Set/Way"),

    rdesc_a15(cp_key(7, 0, 8, 0), "ATS1CPR", None),
    rdesc_a15(cp_key(7, 0, 8, 1), "ATS1CPW", None),
    rdesc_a15(cp_key(7, 0, 8, 2), "ATS1CUR", None),
    rdesc_a15(cp_key(7, 0, 8, 3), "ATS1CUW", None),
    rdesc_a15(cp_key(7, 0, 8, 4), "ATS1NSOPR", None),
    rdesc_a15(cp_key(7, 0, 8, 5), "ATS1NSOPW", None),
    rdesc_a15(cp_key(7, 0, 8, 6), "ATS1NSOUR", None),
    rdesc_a15(cp_key(7, 0, 8, 7), "ATS1NSOUW", None),

    rdesc_all(cp_key(7, 0, 10, 1), "DCCVAC", "Clean Data Cache line by Virtual Address"),
    rdesc_all(cp_key(7, 0, 10, 2), "DCCSW", "Clean Data Cache by Set/Way"),
    rdesc_all(cp_key(7, 0, 10, 4), "DSB", "Data Sync Barrier"),
    rdesc_all(cp_key(7, 0, 10, 5), "DMB", "Data Memory Barrier"),

    rdesc_a15(cp_key(7, 0, 11, 1), "DCCVAU", "Clean Data cache by VA to PoU"),

    rdesc_a15(cp_key(7, 0, 14, 1), "DCCIMVAC", "Clean Data cache by MVA to PoU"),
    rdesc_a15(cp_key(7, 0, 14, 2), "DCCISW", None),

    rdesc_a15(cp_key(7, 4, 8, 0), "ATS1HR", None),
    rdesc_a15(cp_key(7, 4, 8, 0), "ATS1HW", None),

    # c8
    rdesc_a15(cp_key(8, 0, 3, 0), "TLBIALLIS", None),
    rdesc_a15(cp_key(8, 0, 3, 1), "TLBIMVAIS", None),
    rdesc_a15(cp_key(8, 0, 3, 2), "TLBIASIDIS", None),
    rdesc_a15(cp_key(8, 0, 3, 3), "TLBIMVAAIS", None),

    rdesc_a15(cp_key(8, 0, 5, 0), "TLBIALL", None),
    rdesc_a15(cp_key(8, 0, 5, 1), "TLBIMVA", None),
    rdesc_a15(cp_key(8, 0, 5, 2), "TLBIASID", None),
    rdesc_a15(cp_key(8, 0, 5, 3), "TLBIMVAA", None),

    rdesc_a15(cp_key(8, 0, 6, 0), "TLBIALL", None),
    rdesc_a15(cp_key(8, 0, 6, 1), "TLBIMVA", None),
    rdesc_a15(cp_key(8, 0, 6, 2), "TLBIASID", None),
    rdesc_a15(cp_key(8, 0, 6, 3), "TLBIMVAA", None),

    rdesc_a15(cp_key(8, 0, 7, 0), "TLBIALL", None),
    rdesc_a15(cp_key(8, 0, 7, 1), "TLBIMVA", None),
    rdesc_a15(cp_key(8, 0, 7, 2), "TLBIASID", None),
    rdesc_a15(cp_key(8, 0, 7, 3), "TLBIMVAA", None),

    rdesc_a15(cp_key(8, 4, 3, 0), "TLBIALLHIS", None),
    rdesc_a15(cp_key(8, 4, 3, 1), "TLBIMVAHIS", None),
    rdesc_a15(cp_key(8, 4, 3, 4), "TLBIALLNSHIS", None),

    rdesc_a15(cp_key(8, 4, 7, 0), "TLBIALLH", None),
    rdesc_a15(cp_key(8, 4, 7, 1), "TLBIMVAH", None),
    rdesc_a15(cp_key(8, 4, 7, 4), "TLBIALLNSNH", None),

    # c9
    rdesc_a15(cp_key(9, 1, 0, 2), "L2CTLR", None),
    rdesc_a15(cp_key(9, 1, 0, 3), "L2ECTLR", None),

    # c10
    rdesc_a15(cp_key(10, 0, 0, 0), "TLB Lockdown", None),

    rdesc_a15(cp_key(10, 0, 2, 0), "PRRR/MAIR0", None),
    rdesc_a15(cp_key(10, 0, 2, 1), "NMRR/MAIR1", None),

    rdesc_a15(cp_key(10, 0, 3, 0), "AMAIR0", None),
    rdesc_a15(cp_key(10, 0, 3, 1), "AMAIR1", None),

    rdesc_a15(cp_key(10, 4, 2, 0), "HMAIR0", None),
    rdesc_a15(cp_key(10, 4, 2, 1), "HMAIR1", None),

    rdesc_a15(cp_key(10, 4, 3, 0), "HAMAIR0", None),
    rdesc_a15(cp_key(10, 4, 3, 1), "HAMAIR1", None),

    # c12
    rdesc_a15(cp_key(12, 0, 0, 0), "VBAR", None),
    rdesc_a15(cp_key(12, 0, 0, 1), "MVBAR", None),

    rdesc_a15(cp_key(12, 0, 1, 0), "ISR", None),
    rdesc_a15(cp_key(12, 0, 1, 1), "VIR", None),

    rdesc_a15(cp_key(12, 4, 0, 0), "HVBAR", None),

    # c13
    rdesc_a15(cp_key(13, 0, 0, 0), "FCSEIDR", "[deprecated] FSCE ID Register"),
    rdesc_a15(cp_key(13, 0, 0, 1), "CONTEXTIDR", "Context ID Register"),
    rdesc_a15(cp_key(13, 0, 0, 2), "TPIDRURW", "Software Thread ID Register"),
    rdesc_a15(cp_key(13, 0, 0, 3), "TPIDRURO", None),
    rdesc_a15(cp_key(13, 0, 0, 4), "TPIDRPRW", None),

    rdesc_a15(cp_key(13, 4, 0, 2), "HTPIDR", None),

    # c15
    rdesc_a15(cp_key(15, 0, 0, 0), "PCR", "Power Control Register"),
    rdesc_a15(cp_key(15, 0, 1, 0), "NEONBR", "NEON Busy Register"),

    rdesc_a15(cp_key(15, 4, 0, 0), "CFGBA", "Configuration Base Address"),

    rdesc_a15(cp_key(15, 5, 4, 2), "PCR", "Select Lockdown TLB Entry for read"),
    rdesc_a15(cp_key(15, 5, 4, 4), "PCR", "Select Lockdown TLB Entry for write"),
    rdesc_a15(cp_key(15, 5, 5, 2), "PCR", "Main TLB VA register"),
    rdesc_a15(cp_key(15, 5, 6, 2), "PCR", "Main TLB PA register"),
    rdesc_a15(cp_key(15, 5, 7, 2), "PCR", "Main TLB Attribute register"),

    rdesc_cr4(cp_key(15, 0, 14, 0), "CacheSizeOverride", "Cache Size Override"),
)


def lookup_all(opcode):
    """
    Return the list of reg_desc matching the naming fields of @opcode, in
    declaration order. ISA tags are not consulted.
    @opcode: 32 bit instruction word
    """
    key = opcode & MASK_OP1_CRM_OP2_CRN
    return [desc for desc in reg_descs if desc.mask == key]


def filter_isa(descs, isa_mask):
    """Keep the descriptions of @descs applying to one of @isa_mask cores"""
    return [desc for desc in descs if desc.applies_to(isa_mask)]
