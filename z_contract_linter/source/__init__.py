"""Go source loading: parsing, compilation units and type information."""
