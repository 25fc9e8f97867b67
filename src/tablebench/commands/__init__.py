"""Shell commands exposing tablebench functionalities.

tablebench
==========

``tablebench`` runs all the benchmarks and saves the results
to ``Python_Benchmark_Results.xlsx`` in the current directory::

    tablebench

It takes no options, the number of repetitions and the
output file are constants of :mod:`tablebench.commands.tablebench`.
"""
