"""La Poste rate strategy version, stamped on every quote."""

VERSION = "1.0.0"
