"""
crl_partition — revocation lookups against prefix-partitioned CRLs.

A single logical CRL is split across many endpoints, one per two-hex-digit
serial prefix ({base}/ab.crl, {base}/cd.crl, ...). Given a serial and a
base URL, this package resolves the partition, fetches and decodes its
CRL (DER or PEM) and reports whether the serial is on it.

Built on the Railway-Oriented Programming (ROP) framework for
explicit, composable, functional error handling.
"""

__version__ = "0.1.0"
