"""The enforceMethods analysis: collect, scan, report."""
