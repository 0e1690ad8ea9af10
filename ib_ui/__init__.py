"""Console front end for iteration-bench."""
