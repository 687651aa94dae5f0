#
# src/testcommander/__init__.py
#
"""
testcommander: discovers and runs `dotnet test` suites from the command line.
"""
