#!/usr/bin/env python3

"""
Export "More Suits" skin descriptors from game materials.
"""
