# -*- coding: utf-8 -*-
"""
Tests package for adminforms.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""
