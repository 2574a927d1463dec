"""Factory Boy setup for test data generation."""

from __future__ import annotations

from faker import Faker

faker = Faker()
Faker.seed(1234)
