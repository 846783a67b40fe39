"""Domain layer for daily energy expenditure.

Pure physiological formulas and the value objects they operate on,
decoupled from input parsing, configuration and logging.
"""
