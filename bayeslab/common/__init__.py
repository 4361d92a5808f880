"""Input checks and numeric helpers shared by the estimators."""
