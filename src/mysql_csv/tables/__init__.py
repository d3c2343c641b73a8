"""Parsing of box-drawn MySQL client tables into records.

Submodules:
  patterns    -- border characters and the bare line-feed regex
  delimiters  -- column delimiter location and counting
  schema      -- TableGeometry and Table Pydantic models
  reassembly  -- re-merging rows split by line breaks inside field data
  extraction  -- slicing fixed rows into trimmed field strings
  pipeline    -- parse_lines() / parse_file() / convert() entry points
"""
