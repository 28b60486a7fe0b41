"\"\"\"Predicate filtering for PSM, peptide and protein report records.\"\"\""

__version__ = "0.1.0"
