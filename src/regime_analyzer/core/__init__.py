"""Core domain: models, rules, calculators and analyzers."""
