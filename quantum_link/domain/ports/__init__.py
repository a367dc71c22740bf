"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done. The only consistency guarantee asked of
implementations is atomic enforcement of the unique handle column.
"""
