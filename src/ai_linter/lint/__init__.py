"""Two-pass rule review: scan each rule directory, then verify every finding."""
