"""Command-line interface for wsdlc-batch.

The entry point is :func:`wsdlc_batch.cli.main.main`.
"""
