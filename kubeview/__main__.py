"""Allow ``python -m kubeview``."""

from kubeview.main import main

raise SystemExit(main())
