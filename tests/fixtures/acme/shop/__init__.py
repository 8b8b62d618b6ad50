"""Sample shop application scanned by the mockscan tests."""
