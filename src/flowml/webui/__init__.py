# Copyright 2026 FlowML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Browser preview for FlowML documents."""
