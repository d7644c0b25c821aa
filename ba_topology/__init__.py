"""Synthetic router-level topologies from the Barabasi-Albert model."""
