"""
CLI command implementations for winsdkenv.
"""
