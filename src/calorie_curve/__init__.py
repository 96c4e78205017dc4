"""CalorieCurve nutrition lookup backend."""
