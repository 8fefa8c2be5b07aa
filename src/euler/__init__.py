"""
Euler library — helpers for Project Euler problems.

Pure, stateless functions: big-number arithmetic, number theory,
combinatorics, digit manipulation, prime factorization and poker hands.
"""
