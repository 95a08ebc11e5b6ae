"""AAMVA DL/ID record parsing.

Turns the text payload decoded from a PDF417 barcode into a
:class:`~idscan.aamva.parser.ParsedRecord`: header metadata plus a map of
three-letter element tags to their values.  Parsing is best-effort and
never fails on malformed input.
"""
