# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain entities and ports for the CMS publish pipeline."""
