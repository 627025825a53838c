"""Domain data shipped with nilmatrix."""
