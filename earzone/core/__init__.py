"""Internal implementation package for earzone (ring, zones, classifiers, driver)."""
