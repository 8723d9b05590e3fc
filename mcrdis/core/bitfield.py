#-*- coding:utf-8 -*-


class bf(object):
    """
    Named bit field of an instruction word.

    @l: width of the field in bits
    @offset: position of the field least significant bit
    @fname: field name

    >>> crn = bf(l=4, offset=16, fname='crn')
    >>> hex(crn.pack(6))
    '0x60000'
    >>> crn.extract(0xee061f51)
    6
    """

    def __init__(self, l, offset, fname):
        assert l > 0
        assert offset >= 0
        self.l = l
        self.offset = offset
        self.fname = fname

    lmask = property(lambda self:(1 << self.l) - 1)

    @property
    def mask_in_reg(self):
        """Mask of the field bits, positioned in the word"""
        return self.lmask << self.offset

    def pack(self, v):
        """Position @v in the word. Bits above the field width are dropped"""
        return (v & self.lmask) << self.offset

    def extract(self, word):
        """Return the field value read from @word"""
        return (word >> self.offset) & self.lmask

    def __repr__(self):
        return "%s_%s_%d_%d" % (self.__class__.__name__, self.fname,
                                self.l, self.offset)


def pack(field, value):
    return field.pack(value)


def extract(field, word):
    return field.extract(word)


def mask_in_reg(*fields):
    """Union of the positioned masks of @fields"""
    mask = 0
    for field in fields:
        mask |= field.mask_in_reg
    return mask


class bf_pattern(object):
    """
    Fixed bit pattern of an instruction word, written MSB first.

    '0' and '1' are fixed bits, any other character ('X') is free. Spaces
    are ignored.

    >>> cdp = bf_pattern("XXXX 1110 XXXX XXXX XXXX XXXX XXX0 XXXX")
    >>> cdp.check_fbits(0xee000e00)
    True
    """

    def __init__(self, strbits):
        allbits = [x for x in strbits if x != " "]
        fbits = 0
        fmask = 0
        for a in allbits:
            fbits <<= 1
            fmask <<= 1
            if a in '01':
                fbits |= int(a)
                fmask |= 1
        self.strbits = strbits
        self.l = len(allbits)
        self.fbits = fbits
        self.fmask = fmask

    def check_fbits(self, v):
        return v & self.fmask == self.fbits

    def __repr__(self):
        return "%s_%s" % (self.__class__.__name__,
                          self.strbits.replace(" ", ""))
