#-*- coding:utf-8 -*-

import logging
import sys
from argparse import ArgumentParser

from mcrdis.analysis import sources
from mcrdis.arch.arm.cpregs import isa_mask_from_names, isa_names
from mcrdis.arch.arm.disasm import decode_and_describe, log as log_mcrdis

log = logging.getLogger("mcrcli")
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter("%(levelname)-5s: %(message)s"))
log.addHandler(console_handler)
log.setLevel(logging.WARN)

MODES = ["demo", "fulltest", "stdin", "objdump"]


def int_auto(value):
    return int(value, 0)


def get_parser():
    parser = ArgumentParser(prog="mcrdis",
                            description="Decode ARM MCR/MRC opcodes and "
                            "name the coprocessor register they access")
    parser.add_argument('mode', nargs='?', default="demo", choices=MODES,
                        help="Opcode source: built-in list (demo), every "
                        "32 bit value (fulltest), hex lines (stdin) or GNU "
                        "objdump output (objdump) read from standard input")
    parser.add_argument('--isa', action="append", default=[],
                        choices=sorted(isa_names),
                        help="Only show registers of this core (may be "
                        "repeated). Default: show every match")
    parser.add_argument("--start", default=0, type=int_auto,
                        help="First opcode of the fulltest sweep")
    parser.add_argument("--stop", default=sources.SWEEP_END, type=int_auto,
                        help="Opcode ending the fulltest sweep (excluded)")
    parser.add_argument('-v', "--verbose", action="count", default=0,
                        help="Verbose mode (-vv for debug)")
    return parser


def set_verbosity(verbose):
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARN
    for logger in (log, log_mcrdis, sources.log):
        logger.setLevel(level)


def decode_all(opcodes, out, isa_mask=None, banner=False):
    """
    Write the description of each of @opcodes to @out.
    @banner: prefix each decode with a 'Decoding: ' line
    Return the number of MCR/MRC opcodes found.
    """
    count = 0
    for opcode in opcodes:
        if banner:
            print("Decoding: %08x" % opcode, file=out)
        lines = decode_and_describe(opcode, isa_mask)
        if lines:
            count += 1
        for line in lines:
            print(line, file=out)
    return count


def main(argv=None, stdin=None, stdout=None):
    args = get_parser().parse_args(argv)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    set_verbosity(args.verbose)

    isa_mask = None
    if args.isa:
        isa_mask = isa_mask_from_names(args.isa)
        log.debug("Filtering registers with ISA mask 0x%x", isa_mask)

    banner = False
    if args.mode == "fulltest":
        opcodes = sources.sweep(args.start, args.stop)
    elif args.mode == "stdin":
        opcodes = sources.iter_hex_lines(stdin)
    elif args.mode == "objdump":
        opcodes = sources.iter_objdump_lines(
            stdin, echo=stdout.write
        )
    else:
        opcodes = sources.demo()
        banner = True

    count = decode_all(opcodes, stdout, isa_mask, banner)
    log.info("%d MCR/MRC opcodes decoded", count)
    return 0


if __name__ == '__main__':
    sys.exit(main())
