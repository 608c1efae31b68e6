"""Sample data for fhfa_hpi tests."""
