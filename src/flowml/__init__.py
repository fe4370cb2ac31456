# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""FlowML: a diagram notation that transpiles to Mermaid flowcharts."""
