# Copyright (c) Load Balancer SDK Contributors.
# Licensed under the MIT license.

"""Version information for the Load Balancer SDK package."""

__version__ = "0.1.0"
