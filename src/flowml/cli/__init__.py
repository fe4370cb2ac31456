# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for FlowML."""
