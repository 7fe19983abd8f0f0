"""
# pngchunks: PNG-like chunks for humans.

A chunk is a self-describing binary record: a length, a 4-letter type, the
data and a CRC that detects corruption of type and data.

The format is described declaratively as a Chunk whose attributes are fields,
and two basic operations are defined for it and its sub components:

 1. unpack(): reading the binary data and build a high-level representation
    of that, validating it along the way.

 2. pack(): encode the high-level representation into binary data.

to these we add one more

 3. relayout(): recalculate offset and size of each field, a packing
    always implies a relayouting.

An instance representing a chunk can be in one of the following phases

 1. INIT
 2. RELAYOUTING
 3. UNPACKING
 4. DONE (read-only, relayouting doesn't move anything anymore)

"""
