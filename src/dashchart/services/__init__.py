"""Qt services supporting chart widgets."""
