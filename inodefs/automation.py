"""Scripted execution of file-system commands read from text files."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from .directory import create_directory, find_entry, remove_directory, rename_entry
from .files import create_file, delete_file, import_file
from .navigation import Navigator, move_file_to_path
from .partition import FileSystemError, InodeType

MAX_ARGS = 10
SEPARATOR = "═══════════════════════════════════════════"

_EXAMPLE_SCRIPT = """\
# Arquivo de exemplo para execução automática
# Linhas que começam com # são comentários

echo Iniciando demonstração do sistema de arquivos
info

# Criar estrutura de diretórios
criar_dir documentos
criar_dir imagens
criar_dir programas

# Listar conteúdo da raiz
listar

# Navegar para documentos e criar arquivos
navegar documentos
criar_arquivo readme.txt
criar_arquivo notas.txt
listar

# Voltar para raiz
navegar /
echo Demonstração concluída!
"""


@dataclass
class Command:
    """A command name followed by its arguments."""

    name: str
    args: list[str] = field(default_factory=list)


def parse_command(line: str) -> Command | None:
    """Parse one script line; None for blank lines and comments.

    Raises ValueError for an empty string. Arguments past the tenth are dropped.
    """
    if not line:
        raise ValueError("empty command line")
    text = line.lstrip(" \t").rstrip(" \t\r\n")
    if not text or text.startswith("#"):
        return None
    tokens = [token for token in re.split(r"[ \t]+", text) if token]
    return Command(tokens[0], tokens[1 : 1 + MAX_ARGS])


def write_example_script(path: str | Path) -> None:
    """Write a demonstration script to path."""
    Path(path).write_text(_EXAMPLE_SCRIPT, encoding="utf-8")


@dataclass
class RunReport:
    """Counters gathered while running a script."""

    executed: int = 0
    errors: int = 0
    stopped: bool = False

    def success_rate(self) -> float:
        if self.executed == 0:
            return 0.0
        return (self.executed - self.errors) / self.executed * 100


class CommandRunner:
    """Executes parsed commands against the navigator's partition."""

    def __init__(
        self,
        navigator: Navigator,
        show_commands: bool = True,
        pause_on_error: bool = True,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], object] = print,
    ) -> None:
        self.navigator = navigator
        self.show_commands = show_commands
        self.pause_on_error = pause_on_error
        self.input_func = input_func
        self.output = output
        self.delay = 0.1
        self._handlers = {
            "criar_dir": self._create_dir,
            "criar_arquivo": self._create_file,
            "navegar": self._navigate,
            "listar": self._list,
            "importar": self._import,
            "renomear": self._rename,
            "mover": self._move,
            "apagar": self._delete,
            "info": self._info,
            "echo": self._echo,
            "pausar": self._pause,
        }

    @property
    def partition(self):
        return self.navigator.partition

    def _announce(self, text: str) -> None:
        if self.show_commands:
            self.output(text)

    @staticmethod
    def _require(command: Command, count: int, usage: str) -> None:
        if len(command.args) < count:
            noun = "argumento" if count == 1 else "argumentos"
            raise FileSystemError(
                f"Erro: {command.name} requer {count} {noun} ({usage})"
            )

    def _fail(self, exc: FileSystemError, message: str) -> FileSystemError:
        self.output(str(exc))
        return FileSystemError(message)

    def execute(self, command: Command) -> None:
        """Run one command; raises FileSystemError when it fails."""
        if not command.name:
            return
        handler = self._handlers.get(command.name)
        if handler is None:
            raise FileSystemError(f"Comando desconhecido: '{command.name}'")
        handler(command)

    def _create_dir(self, command: Command) -> None:
        self._require(command, 1, "nome")
        name = command.args[0]
        self._announce(f"📁 Executando: criar_dir {name}")
        try:
            create_directory(self.partition, name, self.navigator.current)
        except FileSystemError as exc:
            raise self._fail(exc, f"Falha ao criar diretório '{name}'") from exc
        self.output(f"✅ Diretório '{name}' criado com sucesso")

    def _create_file(self, command: Command) -> None:
        self._require(command, 1, "nome")
        name = command.args[0]
        self._announce(f"📄 Executando: criar_arquivo {name}")
        try:
            create_file(self.partition, name, self.navigator.current)
        except FileSystemError as exc:
            raise self._fail(exc, f"Falha ao criar arquivo '{name}'") from exc
        self.output(f"✅ Arquivo '{name}' criado com sucesso")

    def _navigate(self, command: Command) -> None:
        self._require(command, 1, "diretório")
        target = command.args[0]
        self._announce(f"🔄 Executando: navegar {target}")
        try:
            if target == "/":
                self.navigator.go_root()
            elif target.startswith("/"):
                self.navigator.navigate_to_path(target)
            else:
                self.navigator.navigate(target)
        except FileSystemError as exc:
            raise self._fail(exc, f"Falha ao navegar para '{target}'") from exc
        self.output(f"✅ Navegou para '{target}'")

    def _list(self, command: Command) -> None:
        self._announce("📋 Executando: listar")
        self.output("═══ Conteúdo do diretório atual ═══")
        self.output(self.partition.format_directory(self.navigator.current))

    def _import(self, command: Command) -> None:
        self._require(command, 2, "nome_no_simulador caminho_arquivo_real")
        name, source = command.args[0], command.args[1]
        self._announce(f"📥 Executando: importar {name} {source}")
        try:
            number = create_file(self.partition, name, self.navigator.current)
        except FileSystemError as exc:
            raise self._fail(exc, f"Falha ao criar arquivo '{name}' no simulador") from exc
        try:
            import_file(self.partition, number, source)
        except FileSystemError as exc:
            raise self._fail(
                exc, f"Falha ao importar conteúdo do arquivo '{source}'"
            ) from exc
        self.output(f"✅ Arquivo '{name}' importado com sucesso")

    def _rename(self, command: Command) -> None:
        self._require(command, 2, "nome_atual nome_novo")
        old, new = command.args[0], command.args[1]
        self._announce(f"✏️ Executando: renomear {old} {new}")
        try:
            rename_entry(self.partition, self.navigator.current, old, new)
        except FileSystemError as exc:
            raise self._fail(exc, f"Falha ao renomear '{old}'") from exc
        self.output(f"✅ '{old}' renomeado para '{new}'")

    def _move(self, command: Command) -> None:
        self._require(command, 2, "nome_arquivo caminho_destino")
        name, destination = command.args[0], command.args[1]
        self._announce(f"🔄 Executando: mover {name} {destination}")
        move_file_to_path(self.partition, self.navigator.current, name, destination)
        self.output(f"✅ Arquivo '{name}' movido para '{destination}' com sucesso!")

    def _delete(self, command: Command) -> None:
        self._require(command, 1, "nome")
        name = command.args[0]
        self._announce(f"🗑️ Executando: apagar {name}")
        current = self.navigator.current
        number = find_entry(self.partition, current, name)
        if number is None:
            raise FileSystemError(f"'{name}' não encontrado")
        try:
            if self.partition.inodes[number].type == InodeType.FILE:
                delete_file(self.partition, current, name)
            else:
                remove_directory(self.partition, current, name)
        except FileSystemError as exc:
            raise self._fail(exc, f"Falha ao apagar '{name}'") from exc
        self.output(f"✅ '{name}' apagado com sucesso")

    def _info(self, command: Command) -> None:
        self._announce("📊 Executando: info")
        self.output("═══ Informações do Sistema ═══")
        self.output(self.partition.format_statistics())

    def _echo(self, command: Command) -> None:
        self.output("💬 " + "".join(f"{arg} " for arg in command.args))

    def _pause(self, command: Command) -> None:
        self._announce("⏸️ Executando: pausar")
        self._ask("⏸️ Pressione Enter para continuar...")

    def _ask(self, prompt: str) -> str:
        try:
            return self.input_func(prompt)
        except EOFError:
            return ""

    def run_lines(self, lines: Iterable[str]) -> RunReport:
        """Execute every command in lines and report how it went."""
        report = RunReport()
        for number, line in enumerate(lines, start=1):
            try:
                command = parse_command(line)
            except ValueError:
                self.output(f"⚠️ Linha {number}: Erro no parsing")
                continue
            if command is None:
                continue

            if self.show_commands:
                self.output(f"[{self.navigator.current_path()}] ")

            report.executed += 1
            try:
                self.execute(command)
            except FileSystemError as exc:
                report.errors += 1
                self.output(f"❌ {exc}")
                self.output(f"❌ Erro na linha {number}: {line.rstrip(chr(10))}")
                if self.pause_on_error:
                    answer = self._ask("⏸️ Pausar execução? (s/N): ")
                    if answer[:1] in ("s", "S"):
                        self.output("⏹️ Execução interrompida pelo usuário")
                        report.stopped = True
                        break

            if self.show_commands and self.delay:
                time.sleep(self.delay)

        self.output(SEPARATOR)
        self.output("✅ Execução automática concluída!")
        self.output("📊 Estatísticas:")
        self.output(f"   • Comandos executados: {report.executed}")
        self.output(f"   • Comandos com erro: {report.errors}")
        self.output(f"   • Taxa de sucesso: {report.success_rate():.1f}%")
        return report

    def run_file(self, path: str | Path) -> RunReport:
        """Execute the commands of a script file."""
        try:
            handle = open(path, encoding="utf-8")
        except OSError as exc:
            raise FileSystemError(f"Erro ao abrir arquivo de comandos: {path}") from exc
        with handle:
            self.output("🚀 Iniciando execução automática de comandos...")
            self.output(f"📁 Arquivo: {path}")
            self.output(SEPARATOR)
            return self.run_lines(handle)