"""
Test suite for gensuite

Contains unit tests for the π engine, the prime sieve, the benchmark
harness, the workloads and the command line.
"""
