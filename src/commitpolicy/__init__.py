"""
CommitPolicy - a declarative commit-message policy and its linter.

The package exposes the commit policy descriptor (rule name to severity,
applicability and parameter) and a bounded consumer that evaluates it
against commit messages.

"""

__version__ = "0.1.0"
__author__ = "Headlamp contributors"
