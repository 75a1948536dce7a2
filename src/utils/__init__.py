"""
Network and PDF helpers used around the extraction pipeline.
"""
