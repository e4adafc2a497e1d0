"""SBS: betslip sharing backend."""
