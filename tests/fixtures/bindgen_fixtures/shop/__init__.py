"""Shop schema root; holds only sub-packages."""
