"""
Interface package: non-HTTP front ends for the tic-tac-toe engine.

Modules:
    console — Line-oriented text protocol over stdin/stdout.
              Can be run as a standalone script: python interface/console.py
"""
