# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from vehicare.application.services.clock import Clock, utc_now
from vehicare.application.services.password_hashing import WerkzeugPasswordHasher
from vehicare.application.services.user_directory import UserDirectory
from vehicare.application.services.vehicle_registry import VehicleRegistry
from vehicare.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from vehicare.application.use_cases.users.login_user import LoginUserUseCase
from vehicare.application.use_cases.users.register_user import RegisterUserUseCase
from vehicare.application.use_cases.vehicles.create_vehicle import CreateVehicleUseCase
from vehicare.application.use_cases.vehicles.delete_vehicle import DeleteVehicleUseCase
from vehicare.application.use_cases.vehicles.get_vehicle import GetVehicleUseCase
from vehicare.application.use_cases.vehicles.list_my_vehicles import ListMyVehiclesUseCase
from vehicare.application.use_cases.vehicles.update_vehicle import UpdateVehicleUseCase
from vehicare.domain.users.repositories import PasswordHasher, UserRepository
from vehicare.domain.vehicles.repositories import VehicleRepository
from vehicare.infrastructure.auth.jwt_tokens import JwtTokenService
from vehicare.infrastructure.db import build_engine, build_session_factory, init_db
from vehicare.infrastructure.health import check_database
from vehicare.infrastructure.repositories.memory import (
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryVehicleRepository,
)
from vehicare.infrastructure.repositories.sqlalchemy_users import SqlAlchemyUserRepository
from vehicare.infrastructure.repositories.sqlalchemy_vehicles import SqlAlchemyVehicleRepository
from vehicare.interfaces.http.controllers.auth_controller import AuthController
from vehicare.interfaces.http.controllers.misc_controller import MiscController
from vehicare.interfaces.http.controllers.vehicles_controller import VehiclesController
from vehicare.interfaces.http.identity import IdentityResolver
from vehicare.shared.config import AppConfig, load_config


class Container:
    """Wires the object graph once per application.

    ``STORAGE_BACKEND`` picks the repositories: ``database`` for the
    SQLAlchemy ones, ``memory`` for the lock-guarded in-process maps.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        clock: Clock = utc_now,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self.config = config or load_config()
        self._clock = clock
        self._password_hasher = password_hasher

    @property
    def uses_database(self) -> bool:
        return self.config.storage_backend == "database"

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return self._password_hasher or WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        jwt = self.config.jwt
        return JwtTokenService(
            secret=jwt.secret_key,
            issuer=jwt.issuer,
            audience=jwt.audience,
            lifetime_hours=jwt.lifetime_hours,
            clock=self._clock,
        )

    # Storage

    @cached_property
    def engine(self) -> Engine:
        engine = build_engine(self.config.database)
        init_db(engine)
        return engine

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def memory_store(self) -> InMemoryStore:
        return InMemoryStore()

    @cached_property
    def user_repository(self) -> UserRepository:
        if self.uses_database:
            return SqlAlchemyUserRepository(self.session_factory)
        return InMemoryUserRepository(self.memory_store)

    @cached_property
    def vehicle_repository(self) -> VehicleRepository:
        if self.uses_database:
            return SqlAlchemyVehicleRepository(self.session_factory)
        return InMemoryVehicleRepository(self.memory_store)

    def check_storage(self) -> bool:
        if self.uses_database:
            return check_database(self.engine)
        return True

    # Services

    @cached_property
    def user_directory(self) -> UserDirectory:
        return UserDirectory(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            clock=self._clock,
        )

    @cached_property
    def vehicle_registry(self) -> VehicleRegistry:
        return VehicleRegistry(vehicles=self.vehicle_repository, clock=self._clock)

    # Use cases

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(directory=self.user_directory, tokens=self.token_service)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(directory=self.user_directory)

    @cached_property
    def current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(directory=self.user_directory)

    @cached_property
    def get_vehicle_use_case(self) -> GetVehicleUseCase:
        return GetVehicleUseCase(registry=self.vehicle_registry)

    @cached_property
    def list_vehicles_use_case(self) -> ListMyVehiclesUseCase:
        return ListMyVehiclesUseCase(registry=self.vehicle_registry)

    @cached_property
    def create_vehicle_use_case(self) -> CreateVehicleUseCase:
        return CreateVehicleUseCase(registry=self.vehicle_registry, clock=self._clock)

    @cached_property
    def update_vehicle_use_case(self) -> UpdateVehicleUseCase:
        return UpdateVehicleUseCase(registry=self.vehicle_registry, clock=self._clock)

    @cached_property
    def delete_vehicle_use_case(self) -> DeleteVehicleUseCase:
        return DeleteVehicleUseCase(registry=self.vehicle_registry)

    # Controllers

    @cached_property
    def identity(self) -> IdentityResolver:
        return IdentityResolver(self.token_service)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            register_use_case=self.register_user_use_case,
            current_user_use_case=self.current_user_use_case,
            identity=self.identity,
            security=self.config.security,
        )

    @cached_property
    def vehicles_controller(self) -> VehiclesController:
        return VehiclesController(
            get_vehicle=self.get_vehicle_use_case,
            list_vehicles=self.list_vehicles_use_case,
            create_vehicle=self.create_vehicle_use_case,
            update_vehicle=self.update_vehicle_use_case,
            delete_vehicle=self.delete_vehicle_use_case,
            identity=self.identity,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(storage_check=self.check_storage)
