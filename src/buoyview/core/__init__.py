"""
BuoyView core — feed fetching, parsing and the table/input model.

Nothing in here imports Textual; every module can be exercised without a
running terminal.
"""
