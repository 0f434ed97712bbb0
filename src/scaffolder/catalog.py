"""Built-in service catalogs.

Each catalog is an ordered set of ``ProjectSpec``s together with the tools
that must be installed and the recommended service start order.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnknownCatalogError
from .models import ConfigBackend, ConfigFormat, GatewayRoute, ProjectSpec, ServiceKind


# ---------------------------------------------------------------------------
# Dependency coordinates and annotations
# ---------------------------------------------------------------------------

EUREKA_SERVER = "org.springframework.cloud:spring-cloud-starter-netflix-eureka-server"
EUREKA_CLIENT = "org.springframework.cloud:spring-cloud-starter-netflix-eureka-client"
CONFIG_SERVER = "org.springframework.cloud:spring-cloud-config-server"
CONFIG_CLIENT = "org.springframework.cloud:spring-cloud-starter-config"
GATEWAY = "org.springframework.cloud:spring-cloud-starter-gateway"
WEB = "org.springframework.boot:spring-boot-starter-web"
DATA_JPA = "org.springframework.boot:spring-boot-starter-data-jpa"
POSTGRESQL = "org.postgresql:postgresql"

ENABLE_EUREKA_SERVER = "org.springframework.cloud.netflix.eureka.server.EnableEurekaServer"
ENABLE_CONFIG_SERVER = "org.springframework.cloud.config.server.EnableConfigServer"
ENABLE_DISCOVERY_CLIENT = "org.springframework.cloud.client.discovery.EnableDiscoveryClient"


class Catalog(BaseModel):
    """A named, ordered set of services generated together."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    projects: tuple[ProjectSpec, ...]
    required_tools: tuple[str, ...] = ("gradle",)
    start_order: tuple[str, ...] = Field(
        default=(), description="Recommended start order; defaults to catalog order"
    )
    readme_title: Optional[str] = Field(
        default=None, description="Write a README.md at the output root when set"
    )

    @property
    def ordered_names(self) -> list[str]:
        return list(self.start_order) if self.start_order else [p.name for p in self.projects]


# ---------------------------------------------------------------------------
# Catalog definitions
# ---------------------------------------------------------------------------

_MICROSERVICES = Catalog(
    name="microservices",
    description="Eureka server, config server and gateway (.properties)",
    projects=(
        ProjectSpec(
            name="eureka-server",
            main_class_name="EurekaServerApplication",
            kind=ServiceKind.DISCOVERY_SERVER,
            dependencies=(EUREKA_SERVER,),
            port=8761,
            extra_annotations=(ENABLE_EUREKA_SERVER,),
        ),
        ProjectSpec(
            name="config-server",
            main_class_name="ConfigServerApplication",
            kind=ServiceKind.CONFIG_SERVER,
            dependencies=(CONFIG_SERVER, EUREKA_CLIENT),
            port=8888,
            extra_annotations=(ENABLE_CONFIG_SERVER, ENABLE_DISCOVERY_CLIENT),
        ),
        ProjectSpec(
            name="gateway-service",
            main_class_name="GatewayApplication",
            kind=ServiceKind.GATEWAY,
            dependencies=(GATEWAY, EUREKA_CLIENT, CONFIG_CLIENT),
            port=8080,
            extra_annotations=(ENABLE_DISCOVERY_CLIENT,),
        ),
    ),
)

_MICROSERVICES_POSTGRES = Catalog(
    name="microservices-postgres",
    description="Eureka, config server, API gateway and a PostgreSQL user service (YAML)",
    readme_title="Microservices Demo with Config Server and PostgreSQL",
    projects=(
        ProjectSpec(
            name="eureka-server",
            main_class_name="EurekaDiscoveryServer",
            kind=ServiceKind.DISCOVERY_SERVER,
            dependencies=(EUREKA_SERVER,),
            port=8761,
            extra_annotations=(ENABLE_EUREKA_SERVER,),
            config_format=ConfigFormat.YAML,
        ),
        ProjectSpec(
            name="config-server",
            main_class_name="ConfigServerApplication",
            kind=ServiceKind.CONFIG_SERVER,
            dependencies=(CONFIG_SERVER, EUREKA_CLIENT),
            port=8888,
            extra_annotations=(ENABLE_CONFIG_SERVER,),
            config_format=ConfigFormat.YAML,
        ),
        ProjectSpec(
            name="api-gateway",
            main_class_name="ApiGatewayApplication",
            kind=ServiceKind.GATEWAY,
            dependencies=(GATEWAY, EUREKA_CLIENT, CONFIG_CLIENT),
            port=8080,
            config_format=ConfigFormat.YAML,
        ),
        ProjectSpec(
            name="user-service",
            main_class_name="UserServiceApplication",
            kind=ServiceKind.DATA_SERVICE,
            dependencies=(WEB, DATA_JPA, EUREKA_CLIENT, CONFIG_CLIENT, POSTGRESQL),
            port=8081,
            config_format=ConfigFormat.YAML,
            entity_name="User",
        ),
    ),
)

_GATEWAY = Catalog(
    name="gateway",
    description="A single discovery-enabled gateway service (YAML)",
    projects=(
        ProjectSpec(
            name="gateway-service",
            main_class_name="GatewayApplication",
            kind=ServiceKind.GATEWAY,
            dependencies=(GATEWAY, EUREKA_CLIENT),
            port=8080,
            extra_annotations=(ENABLE_DISCOVERY_CLIENT,),
            config_format=ConfigFormat.YAML,
            routes=(
                GatewayRoute(id="example-service", uri="lb://EXAMPLE-SERVICE", path="/api/**"),
            ),
        ),
    ),
)


def _basic_service(index: int) -> ProjectSpec:
    return ProjectSpec(
        name=f"service{index}",
        main_class_name="Application",
        kind=ServiceKind.WEB_SERVICE,
        dependencies=(WEB,),
        port=0,
        controller_name=f"Service{index}Controller",
    )


_CLOUD_BASIC = Catalog(
    name="cloud-basic",
    description="Gateway with static routes, config server and three hello services",
    required_tools=("java", "gradle"),
    projects=(
        ProjectSpec(
            name="gateway-service",
            main_class_name="Application",
            kind=ServiceKind.GATEWAY,
            dependencies=(GATEWAY,),
            port=8080,
            routes=tuple(
                GatewayRoute(
                    id=f"service{i}",
                    uri=f"http://localhost:{8080 + i}",
                    path=f"/service{i}/**",
                    strip_prefix=1,
                )
                for i in (1, 2, 3)
            ),
        ),
        ProjectSpec(
            name="config-server",
            main_class_name="Application",
            kind=ServiceKind.CONFIG_SERVER,
            dependencies=(CONFIG_SERVER,),
            port=8888,
            extra_annotations=(ENABLE_CONFIG_SERVER,),
            config_backend=ConfigBackend.NATIVE,
        ),
        _basic_service(1),
        _basic_service(2),
        _basic_service(3),
    ),
    start_order=("config-server", "service1", "service2", "service3", "gateway-service"),
)


CATALOGS: dict[str, Catalog] = {
    c.name: c for c in (_MICROSERVICES, _MICROSERVICES_POSTGRES, _GATEWAY, _CLOUD_BASIC)
}


def get_catalog(name: str) -> Catalog:
    """Return the built-in catalog called *name*.

    Raises:
        UnknownCatalogError: If no catalog has that name.
    """
    try:
        return CATALOGS[name]
    except KeyError:
        raise UnknownCatalogError(name, sorted(CATALOGS)) from None
