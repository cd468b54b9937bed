# -*- coding: utf-8 -*-
"""Location: ./toonkit/util/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

String and number formatting policies shared by the encoder and decoder.
"""
