"""Two-stage table builder.

Splits a large table of integers, most of which repeat, into a stage 1 table
of block numbers and a stage 2 table of unique blocks, so that

    t[i] == index2[(index1[i >> shift] << shift) + (i & ((1 << shift) - 1))]

The block size `1 << shift` is chosen to minimize the bytes taken by both
tables when each uses the smallest unsigned integer type that fits it.

Based on the multi-stage table builder by Peter Kankowski (2008), released
under the zlib/libpng license.
"""

import enum

from ucd_tables.mood import stderr_print


class NumericType(enum.Enum):
    U8 = ("uint8_t", 1, 0xFF)
    U16 = ("uint16_t", 2, 0xFFFF)
    U32 = ("uint32_t", 4, 0xFFFFFFFF)

    def __init__(self, c_type, size, limit):
        self.c_type = c_type
        self.size = size
        self.limit = limit


def get_type_size(seq):
    """The narrowest NumericType able to hold every value in `seq`."""
    if not seq:
        raise ValueError("cannot size an empty table")
    minval = min(seq)
    maxval = max(seq)
    if minval < 0:
        raise OverflowError("Negative values do not fit unsigned types")
    for numeric_type in NumericType:
        if maxval <= numeric_type.limit:
            return numeric_type
    raise OverflowError("Too large to fit into unsigned 32-bit types")


def table_bytes(seq):
    return len(seq) * get_type_size(seq).size


class TableSplit:
    def __init__(self, index1, index2, shift):
        self.index1 = index1
        self.index2 = index2
        self.shift = shift
        self.index1_elem_type = get_type_size(index1)
        self.index2_elem_type = get_type_size(index2)

    def lookup(self, i):
        mask = (1 << self.shift) - 1
        return self.index2[(self.index1[i >> self.shift] << self.shift)
                + (i & mask)]

    def byte_size(self):
        return len(self.index1) * self.index1_elem_type.size \
                + len(self.index2) * self.index2_elem_type.size


class TableBuilder:
    """Build the table, compacting identical blocks."""

    def __init__(self, block_size):
        # Stage 2 start of every block seen, keyed by the block's contents.
        self.blocks = {}
        # Stage 1 table contains block numbers (indices into stage 2 table)
        self.stage1 = []
        # Stage 2 table contains the blocks with property values
        self.stage2 = []
        self.block_size = block_size

    def add_block(self, block, count=1):
        if len(block) != self.block_size:
            raise ValueError("block of {} values for block size {}".format(
                    len(block), self.block_size))

        # If there is such block in the stage2 table, use it
        tblock = tuple(block)
        start = self.blocks.get(tblock)
        if start is None:
            # Allocate a new block
            start = len(self.stage2) // self.block_size
            self.stage2 += block
            self.blocks[tblock] = start

        # Add 'count' blocks with the same values
        self.stage1 += [start] * count

    def add_table(self, t):
        for i in range(0, len(t), self.block_size):
            block = list(t[i:i + self.block_size])
            if len(block) < self.block_size:
                block += [0] * (self.block_size - len(block))
            self.add_block(block)

    def byte_size(self):
        return table_bytes(self.stage1) + table_bytes(self.stage2)

    def to_split(self):
        return TableSplit(self.stage1, self.stage2,
                self.block_size.bit_length() - 1)


def compute_maximum_shift(length):
    """The largest shift tried for a table of `length` values:
    log2(next_power_of_two(length)) - 1, and never less than 0."""
    if length < 1:
        raise ValueError("cannot split an empty table")
    return max((length - 1).bit_length() - 1, 0)


def verify_split(t, split):
    for i, value in enumerate(t):
        if split.lookup(i) != value:
            raise ValueError("split at shift {} gives {} instead of {} at {}"
                    .format(split.shift, split.lookup(i), value, i))


def split_table(t, mood_print=stderr_print):
    """Split `t` into the two-stage table taking the fewest bytes.

    A table whose length is not a multiple of the block size has its last
    block padded with zeros.  Ties go to the smallest shift.
    """
    max_shift = compute_maximum_shift(len(t))
    original_bytes = len(t) * get_type_size(t).size

    best = None
    best_bytes = None
    for shift in range(max_shift + 1):
        builder = TableBuilder(1 << shift)
        builder.add_table(t)
        total_bytes = builder.byte_size()
        if best is None or total_bytes < best_bytes:
            best = builder
            best_bytes = total_bytes

    split = best.to_split()
    mood_print("Best: {}+{} bins at shift {}; {} bytes".format(
            len(split.index1), len(split.index2), split.shift, best_bytes))
    mood_print("Size of original table: {} bytes".format(original_bytes))

    if __debug__:
        verify_split(t, split)
    return split
