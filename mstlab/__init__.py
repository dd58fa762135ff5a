"""Minimum spanning trees with Kruskal and Prim on adjacency-list and incidence-matrix graphs."""

__version__ = "0.1.0"