# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.
