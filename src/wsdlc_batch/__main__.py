"""Allow ``python -m wsdlc_batch``."""

from __future__ import annotations

from wsdlc_batch.cli.main import main

if __name__ == "__main__":
    main()
