#-*- coding:utf-8 -*-

import logging

from mcrdis.arch.arm.mcr import instruction_mr
from mcrdis.arch.arm.cpregs import lookup_all, filter_isa

log = logging.getLogger("mcrdis")
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter("[%(levelname)-8s]: %(message)s"))
log.addHandler(console_handler)
log.setLevel(logging.WARN)

UNKNOWN = "Unknown"


def str_unwrap(value):
    if value is None:
        return UNKNOWN
    return value


def desc_to_string(desc):
    return "[%s] : %s" % (str_unwrap(desc.name), str_unwrap(desc.comment))


def decode_and_describe(opcode, isa_mask=None):
    """
    Return the text lines describing @opcode: an empty list if it is no
    MCR/MRC, else the two field summaries followed by one line per known
    register.

    @opcode: 32 bit instruction word
    @isa_mask: if not None, only keep registers of these cores
    """
    instr = instruction_mr.dis(opcode)
    if instr is None:
        return []
    lines = [instr.to_string(), instr.to_fields_string()]
    descs = lookup_all(opcode)
    if isa_mask is not None:
        descs = filter_isa(descs, isa_mask)
    if not descs:
        log.debug("%08x: no known register", opcode)
    for desc in descs:
        lines.append(desc_to_string(desc))
    return lines
