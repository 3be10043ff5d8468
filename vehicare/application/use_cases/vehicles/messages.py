# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

NOT_AUTHENTICATED = "User not authenticated"
VIN_TAKEN = "A vehicle with this VIN already exists"
UPDATE_NOT_FOUND = "Vehicle not found or you don't have permission to update it"
DELETE_NOT_FOUND = "Vehicle not found or you don't have permission to delete it"
CREATE_FAILED = "Failed to create vehicle"
UPDATE_FAILED = "Failed to update vehicle"
DELETE_FAILED = "Failed to delete vehicle"
