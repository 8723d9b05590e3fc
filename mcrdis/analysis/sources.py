#-*- coding:utf-8 -*-

import logging

import pyparsing

from mcrdis.arch.arm.mcr import cp_key, rd, cpnum, BITS_MCR_MRC

log = logging.getLogger("mcrsrc")
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter("[%(levelname)-8s]: %(message)s"))
log.addHandler(console_handler)
log.setLevel(logging.WARN)

OPCODE_MAX = 0xFFFFFFFF
SWEEP_END = OPCODE_MAX + 1


hex_prefix = pyparsing.Suppress(pyparsing.CaselessLiteral("0x"))
hex_digits = pyparsing.Word(pyparsing.hexnums)
hex_int = (pyparsing.Optional(hex_prefix) + hex_digits).set_parse_action(
    lambda tokens: int(tokens[-1], 16)
)

# GNU objdump disassembly line:
#     8000:	ee011f10 	mcr	15, 0, r1, cr1, cr0, {0}
#     8004:	ee01 1f10 	mcr	15, 0, r1, cr1, cr0, {0}
# Thumb-2 wide instructions are dumped as two halfwords, first one high.
objdump_wide = pyparsing.Regex(r"[0-9a-fA-F]{4} [0-9a-fA-F]{4}(?![0-9a-fA-F])")
objdump_opcode = (
    objdump_wide.set_parse_action(
        lambda tokens: int(tokens[0].replace(" ", ""), 16)
    ) |
    pyparsing.Word(pyparsing.hexnums).set_parse_action(
        lambda tokens: int(tokens[0], 16)
    )
)
objdump_line = (
    pyparsing.Word(pyparsing.hexnums)("offset") +
    pyparsing.Suppress(":") +
    objdump_opcode("opcode")
)


def check_opcode(value):
    if not 0 <= value <= OPCODE_MAX:
        raise ValueError("0x%x does not fit in 32 bits" % value)
    return value


def sweep(start=0, stop=SWEEP_END):
    """Yield every opcode of [@start, @stop)"""
    start = max(start, 0)
    stop = min(stop, SWEEP_END)
    return iter(range(start, stop))


def parse_hex_word(text):
    """
    Return the integer written in hexadecimal at the start of @text.

    An optional '0x' prefix is accepted and trailing text is ignored.
    Raise pyparsing.ParseException if @text does not start with an hex
    number, ValueError if the number is wider than 32 bits.
    """
    value = hex_int.parse_string(text)[0]
    return check_opcode(value)


def iter_hex_lines(lines):
    """Yield the opcode of each line of @lines, skipping unparsable ones"""
    for lineno, line in enumerate(lines, 1):
        if not line.strip():
            log.debug("line %d: empty, skipped", lineno)
            continue
        try:
            yield parse_hex_word(line)
        except pyparsing.ParseException as error:
            log.warning("line %d: not an hex opcode (%s), skipped: %r",
                        lineno, error.msg, line.rstrip("\n"))
        except ValueError as error:
            log.warning("line %d: %s, skipped", lineno, error)


def parse_objdump_line(line):
    """
    Return the opcode of an objdump disassembly @line, None if the line
    carries no instruction (header, label, blank line, ...).
    Raise ValueError if the opcode is wider than 32 bits.
    """
    try:
        result = objdump_line.parse_string(line)
    except pyparsing.ParseException:
        return None
    return check_opcode(result["opcode"])


def iter_objdump_lines(lines, echo=None):
    """
    Yield the opcodes found in the objdump output @lines.
    @echo: if set, called with each raw line before its opcode is yielded
    """
    for lineno, line in enumerate(lines, 1):
        if echo is not None:
            echo(line)
        try:
            opcode = parse_objdump_line(line)
        except ValueError as error:
            log.warning("line %d: %s, skipped", lineno, error)
            continue
        if opcode is None:
            log.debug("line %d: no opcode, skipped", lineno)
            continue
        yield opcode


# MCR p15, 0, r5, c0, c0, 0 built from its fields
DEMO_MIDR = cp_key(0, 0, 0, 0) | rd.pack(5) | cpnum.pack(15) | BITS_MCR_MRC

DEMO_OPCODES = (
    (DEMO_MIDR, 0xee011f10) +
    (0xee061f12, 0xee062f11, 0xee064f91, 0xee063f51) * 8 +
    (0xee011f10, 0xee010f10, 0xee000e15)
)


def demo():
    return iter(DEMO_OPCODES)
