"""Calendar day strip: measurement-driven scrolling and month/year header."""
