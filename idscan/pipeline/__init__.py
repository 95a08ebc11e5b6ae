"""Candidate selection and storage hand-off around the parser and mapper."""
