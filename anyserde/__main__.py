# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

from anyserde.cli import main

main()
