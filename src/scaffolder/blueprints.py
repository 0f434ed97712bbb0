"""Embedded template bodies for the generated Spring Boot projects.

Placeholders use ``${name}`` syntax. The registry loads every entry of
:data:`BLUEPRINTS` once at construction; nothing here is mutated at runtime.
"""

from __future__ import annotations

BUILD_GRADLE = """\
plugins {
    id 'org.springframework.boot' version '${spring_boot_version}'
    id 'io.spring.dependency-management' version '${dependency_management_version}'
    id 'java'
}

group = '${group}'
version = '${project_version}'
sourceCompatibility = '${java_version}'

repositories {
    mavenCentral()
}

ext {
    set('springCloudVersion', "${spring_cloud_version}")
}

dependencies {
${dependency_lines}
    testImplementation 'org.springframework.boot:spring-boot-starter-test'
}

dependencyManagement {
    imports {
        mavenBom "org.springframework.cloud:spring-cloud-dependencies:${spring_cloud_version}"
    }
}

tasks.named('test') {
    useJUnitPlatform()
}
"""

SETTINGS_GRADLE = """\
rootProject.name = '${project_name}'
"""

APPLICATION_CLASS = """\
package ${package_name};

import org.springframework.boot.SpringApplication;
import org.springframework.boot.autoconfigure.SpringBootApplication;
${annotation_imports}
@SpringBootApplication
${annotations}public class ${main_class_name} {

    public static void main(String[] args) {
        SpringApplication.run(${main_class_name}.class, args);
    }
}
"""

# -- Discovery server ------------------------------------------------------

DISCOVERY_PROPERTIES = """\
server.port=${port}
spring.application.name=${project_name}
eureka.client.register-with-eureka=false
eureka.client.fetch-registry=false
"""

DISCOVERY_YAML = """\
spring:
  application:
    name: ${project_name}
server:
  port: ${port}

eureka:
  instance:
    hostname: localhost
  client:
    registerWithEureka: false
    fetchRegistry: false
    serviceUrl:
      defaultZone: ${eureka_url | yaml_str}
  server:
    waitTimeInMsWhenSyncEmpty: 0
    response-cache-update-interval-ms: 5000

management:
  endpoints:
    web:
      exposure:
        include: '*'
"""

# -- Config server ---------------------------------------------------------

CONFIG_SERVER_PROPERTIES = """\
server.port=${port}
spring.application.name=${project_name}
spring.cloud.config.server.git.uri=${git_config_repo_url}
spring.cloud.config.server.git.default-label=${git_default_label}
eureka.client.serviceUrl.defaultZone=${eureka_url}
"""

CONFIG_SERVER_YAML = """\
server:
  port: ${port}

spring:
  application:
    name: ${project_name}
  profiles:
    active: git
  cloud:
    config:
      server:
        git:
          uri: ${git_config_repo_url | yaml_str}
          default-label: ${git_default_label | yaml_str}
          clone-on-start: true

eureka:
  client:
    serviceUrl:
      defaultZone: ${eureka_url | yaml_str}
"""

CONFIG_SERVER_NATIVE_PROPERTIES = """\
spring.application.name=${project_name}
server.port=${port}
spring.profiles.active=native
spring.cloud.config.server.native.search-locations=classpath:/config
"""

CONFIG_SERVER_NATIVE_YAML = """\
server:
  port: ${port}

spring:
  application:
    name: ${project_name}
  profiles:
    active: native
  cloud:
    config:
      server:
        native:
          search-locations: classpath:/config
"""

CONFIG_SERVER_BOOTSTRAP = """\
spring.cloud.config.server.git.uri=${git_config_repo_url}
spring.cloud.config.server.git.clone-on-start=true
"""

# -- Gateway ---------------------------------------------------------------

GATEWAY_PROPERTIES = """\
server.port=${port}
spring.application.name=${project_name}
spring.cloud.gateway.discovery.locator.enabled=true
spring.cloud.gateway.discovery.locator.lower-case-service-id=true
spring.config.import=optional:configserver:${config_server_url}
${route_properties}eureka.client.serviceUrl.defaultZone=${eureka_url}
management.endpoints.web.exposure.include=*
"""

GATEWAY_YAML = """\
server:
  port: ${port}

spring:
  application:
    name: ${project_name}
  cloud:
    gateway:
      discovery:
        locator:
          enabled: true
          lower-case-service-id: true
${route_yaml}  config:
    import: ${("optional:configserver:" ~ config_server_url) | yaml_str}

eureka:
  client:
    serviceUrl:
      defaultZone: ${eureka_url | yaml_str}
  instance:
    preferIpAddress: true

management:
  endpoints:
    web:
      exposure:
        include: '*'
"""

# -- Plain web service -----------------------------------------------------

WEB_SERVICE_PROPERTIES = """\
spring.application.name=${project_name}
server.port=${port}
"""

WEB_SERVICE_YAML = """\
spring:
  application:
    name: ${project_name}
server:
  port: ${port}
"""

HELLO_CONTROLLER = """\
package ${package_name}.controller;

import org.springframework.web.bind.annotation.GetMapping;
import org.springframework.web.bind.annotation.RestController;

@RestController
public class ${controller_name} {

    @GetMapping("/hello")
    public String sayHello() {
        return "Hello from ${project_name}!";
    }
}
"""

# -- Data-backed service ---------------------------------------------------

DATA_SERVICE_PROPERTIES = """\
server.port=${port}
spring.application.name=${project_name}
spring.config.import=optional:configserver:${config_server_url}
spring.datasource.url=${db_url}
spring.datasource.username=${db_username}
spring.datasource.password=${db_password}
spring.jpa.hibernate.ddl-auto=update
spring.jpa.show-sql=true
eureka.client.serviceUrl.defaultZone=${eureka_url}
"""

DATA_SERVICE_YAML = """\
server:
  port: ${port}

spring:
  application:
    name: ${project_name}
  config:
    import: ${("optional:configserver:" ~ config_server_url) | yaml_str}
  datasource:
    url: ${db_url | yaml_str}
    username: ${db_username | yaml_str}
    password: ${db_password | yaml_str}
  jpa:
    hibernate:
      ddl-auto: update
    show-sql: true

eureka:
  client:
    serviceUrl:
      defaultZone: ${eureka_url | yaml_str}
"""

ENTITY = """\
package ${package_name};

import jakarta.persistence.Entity;
import jakarta.persistence.GeneratedValue;
import jakarta.persistence.GenerationType;
import jakarta.persistence.Id;
import jakarta.persistence.Table;

@Entity
@Table(name = "${table_name}")
public class ${entity_name} {
    @Id
    @GeneratedValue(strategy = GenerationType.IDENTITY)
    private Long id;
    private String name;
    private String email;

    public Long getId() { return id; }
    public void setId(Long id) { this.id = id; }
    public String getName() { return name; }
    public void setName(String name) { this.name = name; }
    public String getEmail() { return email; }
    public void setEmail(String email) { this.email = email; }
}
"""

REPOSITORY = """\
package ${package_name};

import org.springframework.data.jpa.repository.JpaRepository;

public interface ${entity_name}Repository extends JpaRepository<${entity_name}, Long> {
}
"""

ENTITY_CONTROLLER = """\
package ${package_name};

import org.springframework.beans.factory.annotation.Autowired;
import org.springframework.web.bind.annotation.*;
import java.util.List;

@RestController
@RequestMapping("/${table_name}")
public class ${entity_name}Controller {

    @Autowired
    private ${entity_name}Repository ${entity_var}Repository;

    @PostMapping
    public ${entity_name} create${entity_name}(@RequestBody ${entity_name} ${entity_var}) {
        return ${entity_var}Repository.save(${entity_var});
    }

    @GetMapping
    public List<${entity_name}> getAll${entity_name}s() {
        return ${entity_var}Repository.findAll();
    }
}
"""

# -- Catalog-level files ---------------------------------------------------

README = """\
# ${title}

This project sets up a microservices infrastructure using Spring Boot and Spring Cloud.

## Services

${service_list}

## Setup

1. Ensure Java ${java_version} and Gradle are installed on your system.
2. Point the Config Server at your configuration repository (currently ${git_config_repo_url}).
3. Make sure the datasource at ${db_url} exists and is reachable.
4. Run each service: `gradle bootRun`

Start the services in this order:
${start_order}
"""


BLUEPRINTS: dict[str, str] = {
    "build.gradle": BUILD_GRADLE,
    "settings.gradle": SETTINGS_GRADLE,
    "application-class": APPLICATION_CLASS,
    "config/discovery-server.properties": DISCOVERY_PROPERTIES,
    "config/discovery-server.yml": DISCOVERY_YAML,
    "config/config-server.properties": CONFIG_SERVER_PROPERTIES,
    "config/config-server.yml": CONFIG_SERVER_YAML,
    "config/config-server-native.properties": CONFIG_SERVER_NATIVE_PROPERTIES,
    "config/config-server-native.yml": CONFIG_SERVER_NATIVE_YAML,
    "config/config-server-bootstrap": CONFIG_SERVER_BOOTSTRAP,
    "config/gateway.properties": GATEWAY_PROPERTIES,
    "config/gateway.yml": GATEWAY_YAML,
    "config/web-service.properties": WEB_SERVICE_PROPERTIES,
    "config/web-service.yml": WEB_SERVICE_YAML,
    "config/data-service.properties": DATA_SERVICE_PROPERTIES,
    "config/data-service.yml": DATA_SERVICE_YAML,
    "web/hello-controller": HELLO_CONTROLLER,
    "data/entity": ENTITY,
    "data/repository": REPOSITORY,
    "data/controller": ENTITY_CONTROLLER,
    "readme": README,
}
