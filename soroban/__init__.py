"""Planetary Soroban: a digital abacus whose beads are ringed planets."""
