"""Interactive text menus driving the simulated file system."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
import time
from pathlib import Path
from typing import Callable

from .automation import CommandRunner, write_example_script
from .directory import create_directory, find_entry, remove_directory, rename_entry
from .files import (
    create_file,
    delete_file,
    file_info,
    find_file_recursive,
    format_file_content,
    import_file,
    move_file,
    rename_file,
)
from .navigation import (
    MAX_PATH_DEPTH,
    Navigator,
    PathTooDeepError,
    move_file_to_path,
    path_suggestions,
)
from .partition import MAX_NAME, FileSystemError, InodeType, Partition

RULE = "═══════════════════════════════════════════"
MAX_PATH_INPUT = 255
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

_ABOUT = """\
╔═══════════════════════════════════════════╗
║           📖 SOBRE O SIMULADOR            ║
╚═══════════════════════════════════════════╝
🔹 Simulador de Sistema de Arquivos v1.0
🔹 Implementa conceitos de i-nodes e blocos
🔹 Suporte a diretórios e arquivos
🔹 Operações: criar, listar, renomear, mover, apagar
🔹 Importação de arquivos reais do sistema
🔹 Busca recursiva e estatísticas detalhadas

📋 Estruturas principais:
   • I-nodes: metadados dos arquivos/diretórios
   • Blocos: armazenamento de dados
   • Bitmaps: controle de recursos livres/usados
   • Entradas de diretório: mapeamento nome→i-node

⚡ Desenvolvido para fins educacionais"""

_COMMAND_HELP = """\
📖 COMANDOS DISPONÍVEIS
═══════════════════════════════════════════
📁 criar_dir <nome>                  - Criar diretório
📄 criar_arquivo <nome>              - Criar arquivo vazio
🔄 navegar <dir>                     - Navegar para diretório
📋 listar                            - Listar conteúdo atual
📥 importar <nome> <caminho>         - Importar arquivo externo
✏️ renomear <antigo> <novo>          - Renomear arquivo/diretório
🔄 mover <arquivo> <destino>         - Mover arquivo
🗑️ apagar <nome>                     - Apagar arquivo/diretório
📊 info                              - Mostrar estatísticas
💬 echo <texto>                      - Exibir mensagem
⏸️ pausar                            - Pausar execução

💡 DICAS:
• Use # para comentários
• Caminhos absolutos começam com /
• Use '..' para voltar um nível
• Linhas vazias são ignoradas"""


class Shell:
    """The menu-driven session: one partition, a current directory and settings."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], object] = print,
    ) -> None:
        self.input_func = input_func
        self.output = output
        self.partition: Partition | None = None
        self.navigator: Navigator | None = None
        self.initialized = False
        self.verbose = True
        self.show_commands = True
        self.pause_on_error = True
        self.command_delay = 0.1

    # ------------------------------------------------------------ input helpers

    def _read(self, prompt: str) -> str:
        return self.input_func(prompt)

    def _read_name(self, prompt: str) -> str:
        return self._read(prompt).rstrip("\n")[:MAX_NAME]

    def _read_path(self, prompt: str) -> str:
        return self._read(prompt).rstrip("\n")[:MAX_PATH_INPUT]

    def _read_int(self, prompt: str) -> int | None:
        match = _INT_PREFIX.match(self._read(prompt))
        return int(match.group(1)) if match else None

    def _confirm(self, prompt: str) -> bool:
        return self._read(prompt)[:1] in ("s", "S")

    def _pause(self) -> None:
        try:
            self._read("\nPressione Enter para continuar...")
        except EOFError:
            pass

    def _clear(self) -> None:
        if self.output is print and sys.stdout.isatty():
            command = "cls" if sys.platform.startswith("win") else "clear"
            subprocess.run(command, shell=True, check=False)

    def _say_location(self) -> None:
        path = self.navigator.current_path()
        if self.navigator.depth() == 0:
            self.output("📁 Localização atual: / (raiz)")
        else:
            self.output(f"📁 Localização atual: {path}")

    def _release(self) -> None:
        self.partition = None
        self.navigator = None
        self.initialized = False

    def _menu_header(self, title: str) -> None:
        self.output(f"\n{RULE}\n{title}\n{RULE}")

    # --------------------------------------------------------------- main menu

    def run(self) -> None:
        """Show the main menu until the user leaves or input ends."""
        try:
            while True:
                self._clear()
                self._show_main_menu()
                choice = self._read_int("Escolha uma opção: ")
                if choice is None:
                    self.output("❌ Opção inválida!")
                    self._pause()
                    continue
                if choice == 0:
                    if self.initialized:
                        self.output("\n🔄 Liberando recursos...")
                        self._release()
                    self.output("👋 Obrigado por usar o simulador!")
                    return
                self._dispatch_main(choice)
        except EOFError:
            self._release()

    def _show_main_menu(self) -> None:
        self.output("╔═══════════════════════════════════════════╗")
        self.output("║        🗄️  SIMULADOR DE SISTEMA DE        ║")
        self.output("║              ARQUIVOS v1.0               ║")
        self.output("╚═══════════════════════════════════════════╝\n")
        if self.initialized:
            self.output("🟢 Sistema INICIALIZADO")
            self._say_location()
        else:
            self.output("🔴 Sistema NÃO INICIALIZADO")
            self.output("📁 Execute a inicialização primeiro!")
        self._menu_header("📋 MENU PRINCIPAL")
        if not self.initialized:
            self.output("1. 🚀 Inicializar sistema de arquivos")
        else:
            self.output("1. 🚀 Reinicializar sistema")
            self.output("2. 📁 Operações com diretórios")
            self.output("3. 📄 Operações com arquivos")
            self.output("4. ⚙️  Configurações e informações")
            self.output("5. 🤖 Execução automática de comandos")
        self.output("9. ❓ Sobre o simulador")
        self.output("0. 🚪 Sair")
        self.output(RULE)

    def _dispatch_main(self, choice: int) -> None:
        submenus = {
            2: self.directories_menu,
            3: self.files_menu,
            4: self.settings_menu,
            5: self.automation_menu,
        }
        if choice == 1:
            if self.initialized:
                self._release()
            self.initialize_menu()
        elif choice in submenus:
            if self.initialized:
                submenus[choice]()
            else:
                self.output("❌ Sistema não inicializado!")
                self._pause()
        elif choice == 9:
            self.output("\n" + _ABOUT)
            self._pause()
        else:
            self.output("❌ Opção inválida!")
            self._pause()

    # ---------------------------------------------------------- initialization

    def initialize_menu(self) -> None:
        """Ask for partition and block sizes and format a new partition."""
        self.output(f"\n{RULE}\n🚀 INICIALIZAÇÃO DO SISTEMA DE ARQUIVOS\n{RULE}")
        self.output("📋 Configurações recomendadas:")
        self.output("   • Tamanho da partição: 8192-65536 bytes")
        self.output("   • Tamanho do bloco: 512-1024 bytes\n")

        while True:
            size = self._read_int("💾 Digite o tamanho da partição (em bytes): ")
            if size is None:
                self.output("❌ Erro: Digite um número válido.")
                continue
            if size < 1024 or size > 1000000:
                self.output("⚠️  Aviso: Tamanho fora da faixa recomendada.")
            break

        while True:
            block_size = self._read_int("🔧 Digite o tamanho do bloco (em bytes): ")
            if block_size is None:
                self.output("❌ Erro: Digite um número válido.")
                continue
            if block_size == 0 or size % block_size != 0:
                self.output(
                    "❌ Erro: O tamanho da partição deve ser múltiplo do tamanho do bloco."
                )
                continue
            break

        self.output("\n⏳ Inicializando sistema de arquivos...")
        try:
            partition = Partition(size, block_size)
        except FileSystemError as exc:
            self.output(str(exc))
            self.output("❌ Falha na inicialização do sistema.")
        else:
            self.partition = partition
            self.navigator = Navigator(partition)
            self.initialized = True
            self.output("Partição inicializada com sucesso:")
            self.output(f"  Tamanho: {partition.size} bytes")
            self.output(f"  Tamanho do bloco: {partition.block_size} bytes")
            self.output(f"  Número de blocos: {partition.num_blocks}")
            self.output(f"  Número de i-nodes: {partition.num_inodes}")
            self.output(f"  Entradas por bloco: {partition.entries_per_block()}")
            self.output("✅ Sistema inicializado com sucesso!")
            self.output("\n" + partition.format_statistics() + "\n")
        self._pause()

    # ------------------------------------------------------------ directories

    def directories_menu(self) -> None:
        """Directory operations on the current directory."""
        while True:
            self._menu_header("📁 OPERAÇÕES COM DIRETÓRIOS")
            self._say_location()
            self.output("\n1. 📋 Listar conteúdo do diretório atual")
            self.output("2. ➕ Criar novo diretório")
            self.output("3. ✏️  Renomear diretório")
            self.output("4. 🗑️  Apagar diretório")
            self.output("5. 🔄 Navegar para diretório")
            self.output("0. ⬅️  Voltar ao menu principal")
            self.output(RULE)
            choice = self._read_int("Escolha uma opção: ")
            if choice is None:
                self.output("❌ Opção inválida!")
                continue
            if choice == 0:
                return
            if choice == 1:
                self.output("\n📋 Conteúdo do diretório:")
                self.output(self.partition.format_directory(self.navigator.current))
            elif choice == 2:
                self._create_directory()
            elif choice == 3:
                self._rename_directory()
            elif choice == 4:
                self._remove_directory()
            elif choice == 5:
                self._advanced_navigation()
            else:
                self.output("❌ Opção inválida!")
            self._pause()

    def _create_directory(self) -> None:
        self.output("\n➕ Criar novo diretório")
        name = self._read_name("Digite o nome do diretório: ")
        if self.verbose:
            self.output(f"⏳ Criando diretório '{name}'...")
        try:
            number = create_directory(self.partition, name, self.navigator.current)
        except FileSystemError as exc:
            self.output(str(exc))
            self.output("❌ Falha ao criar diretório.")
        else:
            self.output(f"Diretório '{name}' criado com sucesso (i-node {number}).")
            self.output("✅ Diretório criado com sucesso!")

    def _rename_directory(self) -> None:
        self.output("\n✏️  Renomear diretório")
        old = self._read_name("Nome atual do diretório: ")
        new = self._read_name("Novo nome: ")
        if self.verbose:
            self.output(f"⏳ Renomeando '{old}' para '{new}'...")
        try:
            rename_entry(self.partition, self.navigator.current, old, new)
        except FileSystemError as exc:
            self.output(str(exc))
            self.output("❌ Falha ao renomear diretório.")
        else:
            self.output(f"Entrada '{old}' renomeada para '{new}'.")
            self.output("✅ Diretório renomeado com sucesso!")

    def _remove_directory(self) -> None:
        self.output("\n🗑️  Apagar diretório")
        self.output("⚠️  ATENÇÃO: Esta operação é irreversível!")
        name = self._read_name("Nome do diretório a apagar: ")
        if not self._confirm("Tem certeza? (s/N): "):
            self.output("❌ Operação cancelada.")
            return
        if self.verbose:
            self.output(f"⏳ Apagando diretório '{name}'...")
        try:
            remove_directory(self.partition, self.navigator.current, name)
        except FileSystemError as exc:
            self.output(str(exc))
            self.output("❌ Falha ao apagar diretório.")
        else:
            self.output(f"Diretório '{name}' removido com sucesso.")
            self.output("✅ Diretório apagado com sucesso!")

    def _advanced_navigation(self) -> None:
        self.output("\n🔄 Navegação Avançada")
        self.output("1. 📁 Navegar usando caminho completo")
        self.output("2. 📋 Navegar usando nome do diretório (atual)")
        choice = self._read_int("Opção: ")
        if choice == 1:
            path = self._read_path("Digite o caminho completo (ex: /docs/imagens): ")
            if not path:
                self.output("❌ Caminho inválido.")
                return
            try:
                self.navigator.navigate_to_path(path)
            except FileSystemError as exc:
                self.output(f"❌ {exc}")
            else:
                self.output(f"✅ Navegou para '{path}' com sucesso.")
        elif choice == 2:
            self._simple_navigation()
        else:
            self.output("❌ Opção inválida!")

    def _simple_navigation(self) -> None:
        self.output("\n🔄 Navegar para diretório")
        self.output("Digite:")
        self.output("  • Nome do diretório para entrar")
        self.output("  • '..' para voltar um nível")
        self.output("  • '/' para ir à raiz")
        name = self._read_name("Opção: ")
        if not name:
            self.output("❌ Nome inválido.")
            return
        if name == "/":
            self.navigator.go_root()
            self.output("✅ Voltou para o diretório raiz.")
            return
        try:
            self.navigator.navigate(name)
        except PathTooDeepError:
            self.output(f"❌ Caminho muito profundo (máximo {MAX_PATH_DEPTH} níveis).")
        except FileSystemError:
            self.output(f"❌ Diretório '{name}' não encontrado.")
        else:
            if name == "..":
                self.output("✅ Voltou um nível no diretório.")
            else:
                self.output(f"✅ Navegou para o diretório '{name}'.")

    # ------------------------------------------------------------------ files

    def files_menu(self) -> None:
        """File operations on the current directory."""
        actions = {
            2: self._create_file,
            3: self._import_file,
            4: self._view_file,
            5: self._file_details,
            6: self._rename_file,
            7: self._move_file,
            8: self._delete_file,
            9: self._search_file,
        }
        while True:
            self._menu_header("📄 OPERAÇÕES COM ARQUIVOS")
            self._say_location()
            self.output("\n1. 📋 Listar arquivos do diretório atual")
            self.output("2. ➕ Criar arquivo vazio")
            self.output("3. 📥 Importar arquivo do sistema")
            self.output("4. 👁️  Visualizar conteúdo do arquivo")
            self.output("5. ℹ️  Informações detalhadas do arquivo")
            self.output("6. ✏️  Renomear arquivo")
            self.output("7. 🔄 Mover arquivo")
            self.output("8. 🗑️  Apagar arquivo")
            self.output("9. 🔍 Buscar arquivo (recursivo)")
            self.output("0. ⬅️  Voltar ao menu principal")
            self.output(RULE)
            choice = self._read_int("Escolha uma opção: ")
            if choice is None:
                self.output("❌ Opção inválida!")
                continue
            if choice == 0:
                return
            if choice == 1:
                self.output("\n📋 Arquivos no diretório atual:")
                self.output(self.partition.format_directory(self.navigator.current))
            elif choice in actions:
                actions[choice]()
            else:
                self.output("❌ Opção inválida!")
            self._pause()

    def _create_file(self) -> None:
        self.output("\n➕ Criar arquivo vazio")
        name = self._read_name("Nome do arquivo: ")
        if self.verbose:
            self.output(f"⏳ Criando arquivo '{name}'...")
        try:
            number = create_file(self.partition, name, self.navigator.current)
        except FileSystemError as exc:
            self.output(str(exc))
            self.output("❌ Falha ao criar arquivo.")
        else:
            self.output(f"Arquivo '{name}' criado com sucesso (i-node {number}).")
            self.output("✅ Arquivo criado com sucesso!")

    def _import_file(self) -> None:
        self.output("\n📥 Importar arquivo do sistema")
        name = self._read_name("Nome do arquivo no simulador: ")
        source = self._read_path("Caminho do arquivo real: ")
        try:
            number = create_file(self.partition, name, self.navigator.current)
        except FileSystemError as exc:
            self.output(str(exc))
            self.output("❌ Falha ao criar arquivo no simulador.")
            return
        self.output(f"Arquivo '{name}' criado com sucesso (i-node {number}).")
        if self.verbose:
            self.output(f"⏳ Importando conteúdo de '{source}'...")
        try:
            size = import_file(self.partition, number, source)
        except FileSystemError as exc:
            self.output(str(exc))
            self.output("❌ Falha ao importar conteúdo do arquivo.")
        else:
            self.output(f"Arquivo '{source}' importado com sucesso ({size} bytes).")
            self.output("✅ Arquivo importado com sucesso!")

    def _named_file(self, prompt: str) -> int | None:
        name = self._read_name(prompt)
        number = find_entry(self.partition, self.navigator.current, name)
        if number is None or self.partition.inodes[number].type != InodeType.FILE:
            self.output("❌ Arquivo não encontrado.")
            return None
        return number

    def _view_file(self) -> None:
        self.output("\n👁️  Visualizar conteúdo do arquivo")
        number = self._named_file("Nome do arquivo: ")
        if number is not None:
            self.output(format_file_content(self.partition, number))

    def _file_details(self) -> None:
        self.output("\nℹ️  Informações detalhadas do arquivo")
        number = self._named_file("Nome do arquivo: ")
        if number is not None:
            self.output(file_info(self.partition, number))

    def _rename_file(self) -> None:
        self.output("\n✏️  Renomear arquivo")
        old = self._read_name("Nome atual: ")
        new = self._read_name("Novo nome: ")
        if self.verbose:
            self.output(f"⏳ Renomeando '{old}' para '{new}'...")
        try:
            rename_file(self.partition, self.navigator.current, old, new)
        except FileSystemError as exc:
            self.output(str(exc))
            self.output("❌ Falha ao renomear arquivo.")
        else:
            self.output(f"Entrada '{old}' renomeada para '{new}'.")
            self.output("✅ Arquivo renomeado com sucesso!")

    def _move_file(self) -> None:
        self.output("\n🔄 Mover arquivo")
        name = self._read_name("Nome do arquivo: ")
        self.output("\nEscolha como especificar o destino:")
        self.output("1. 📁 Caminho completo (ex: /docs/imagens)")
        self.output("2. 🆔 I-node do diretório (método antigo)")
        choice = self._read_int("Opção: ")
        if choice == 1:
            destination = self._read_path("Caminho do diretório destino: ")
            self.output("\n💡 Alguns diretórios disponíveis a partir da raiz:")
            self.output("💡 Diretórios disponíveis:")
            for suggestion in path_suggestions(self.partition, 0, "/"):
                self.output(f"   {suggestion}")
            if self.verbose:
                self.output(f"⏳ Movendo arquivo '{name}' para '{destination}'...")
            try:
                move_file_to_path(self.partition, self.navigator.current, name, destination)
            except FileSystemError as exc:
                self.output(f"❌ {exc}")
            else:
                self.output(f"Arquivo '{name}' movido com sucesso.")
                self.output(f"✅ Arquivo '{name}' movido para '{destination}' com sucesso!")
        elif choice == 2:
            target = self._read_int("I-node do diretório destino (0 = raiz): ")
            if target is None:
                self.output("❌ I-node inválido!")
                return
            if self.verbose:
                self.output(f"⏳ Movendo arquivo '{name}'...")
            try:
                move_file(self.partition, self.navigator.current, name, target)
            except FileSystemError as exc:
                self.output(str(exc))
                self.output("❌ Falha ao mover arquivo.")
            else:
                self.output("✅ Arquivo movido com sucesso!")
        else:
            self.output("❌ Opção inválida!")

    def _delete_file(self) -> None:
        self.output("\n🗑️  Apagar arquivo")
        self.output("⚠️  ATENÇÃO: Esta operação é irreversível!")
        name = self._read_name("Nome do arquivo: ")
        if not self._confirm("Tem certeza? (s/N): "):
            self.output("❌ Operação cancelada.")
            return
        if self.verbose:
            self.output(f"⏳ Apagando arquivo '{name}'...")
        try:
            delete_file(self.partition, self.navigator.current, name)
        except FileSystemError as exc:
            self.output(str(exc))
            self.output("❌ Falha ao apagar arquivo.")
        else:
            self.output(f"Arquivo '{name}' apagado com sucesso.")
            self.output("✅ Arquivo apagado com sucesso!")

    def _search_file(self) -> None:
        self.output("\n🔍 Buscar arquivo (recursivo)")
        name = self._read_name("Nome do arquivo: ")
        if self.verbose:
            self.output(f"⏳ Buscando arquivo '{name}'...")
        number = find_file_recursive(self.partition, 0, name)
        if number is None:
            self.output("❌ Arquivo não encontrado.")
        else:
            self.output(f"✅ Arquivo encontrado (i-node {number})!")
            self.output(file_info(self.partition, number))

    # --------------------------------------------------------------- settings

    def settings_menu(self) -> None:
        """Statistics, verbosity, i-node table, bitmaps and reset."""
        while True:
            self._menu_header("⚙️  CONFIGURAÇÕES E INFORMAÇÕES")
            self.output("1. 📊 Mostrar estatísticas do sistema")
            state = "ATIVO" if self.verbose else "INATIVO"
            self.output(f"2. 🔧 Alternar modo verboso (atual: {state})")
            self.output("3. 🆔 Mostrar informações dos i-nodes")
            self.output("4. 🗺️  Mostrar mapa de bits")
            self.output("5. 🔄 Reinicializar sistema")
            self.output("0. ⬅️  Voltar ao menu principal")
            self.output(RULE)
            choice = self._read_int("Escolha uma opção: ")
            if choice is None:
                self.output("❌ Opção inválida!")
                continue
            if choice == 0:
                return
            if choice == 1:
                self.output("\n" + self.partition.format_statistics() + "\n")
            elif choice == 2:
                self.verbose = not self.verbose
                word = "ATIVADO" if self.verbose else "DESATIVADO"
                self.output(f"✅ Modo verboso {word}!")
            elif choice == 3:
                self._inode_table()
            elif choice == 4:
                self._bitmaps()
            elif choice == 5:
                self.output("\n🔄 Reinicializar sistema")
                self.output("⚠️  ATENÇÃO: Todos os dados serão perdidos!")
                if self._confirm("Tem certeza? (s/N): "):
                    self._release()
                    self.output(
                        "✅ Sistema reinicializado. Execute a inicialização novamente."
                    )
                    self._pause()
                    return
                self.output("❌ Operação cancelada.")
            else:
                self.output("❌ Opção inválida!")
            self._pause()

    def _inode_table(self) -> None:
        self.output("\n🆔 Informações dos I-nodes:")
        self.output(f"{'I-node':<6} {'Tipo':<8} {'Tamanho':<10} {'Última Modificação':<20}")
        self.output("─────────────────────────────────────────────────")
        kinds = {InodeType.DIRECTORY: "DIR", InodeType.FILE: "FILE"}
        for number, node in enumerate(self.partition.inodes):
            if not self.partition.inode_bitmap[number]:
                continue
            kind = kinds.get(node.type, "LIVRE")
            stamp = time.ctime(node.modified)
            self.output(f"{number:<6} {kind:<8} {node.size:<10} {stamp:<20}")

    def _bitmaps(self) -> None:
        def rows(bitmap: list[bool], label: str, width: int) -> list[str]:
            return [
                f"{label} {start:{width}d}-{start + 31:{width}d}: "
                + "".join("U" if used else "L" for used in bitmap[start:start + 32])
                for start in range(0, len(bitmap), 32)
            ]

        self.output("\n🗺️  Mapa de bits dos blocos (L=Livre, U=Usado):")
        for line in rows(self.partition.block_bitmap, "Blocos", 3):
            self.output(line)
        self.output("\n🗺️  Mapa de bits dos i-nodes (L=Livre, U=Usado):")
        for line in rows(self.partition.inode_bitmap, "I-nodes", 2):
            self.output(line)

    # ------------------------------------------------------------- automation

    def automation_menu(self) -> None:
        """Run command scripts and adjust how they are run."""
        while True:
            self._menu_header("🤖 EXECUÇÃO AUTOMÁTICA DE COMANDOS")
            self.output("Configurações atuais:")
            self.output(f"  • Mostrar comandos: {'SIM' if self.show_commands else 'NÃO'}")
            self.output(f"  • Pausar em erro: {'SIM' if self.pause_on_error else 'NÃO'}")
            self.output("\n1. 📄 Executar arquivo de comandos")
            self.output("2. ⚙️ Alternar exibição de comandos")
            self.output("3. 🛑 Alternar pausa em erro")
            self.output("4. 📖 Ver comandos disponíveis")
            self.output("5. 📝 Criar arquivo de exemplo")
            self.output("0. ⬅️ Voltar ao menu principal")
            self.output(RULE)
            choice = self._read_int("Escolha uma opção: ")
            if choice is None:
                self.output("❌ Opção inválida!")
                continue
            if choice == 0:
                return
            if choice == 1:
                self._run_script()
            elif choice == 2:
                self.show_commands = not self.show_commands
                word = "ATIVADA" if self.show_commands else "DESATIVADA"
                self.output(f"✅ Exibição de comandos {word}")
            elif choice == 3:
                self.pause_on_error = not self.pause_on_error
                word = "ATIVADA" if self.pause_on_error else "DESATIVADA"
                self.output(f"✅ Pausa em erro {word}")
            elif choice == 4:
                self.output("\n" + _COMMAND_HELP)
            elif choice == 5:
                self._write_example()
            else:
                self.output("❌ Opção inválida!")
            self._pause()

    def _run_script(self) -> None:
        self.output("\n📄 Executar arquivo de comandos")
        path = self._read_path("Caminho do arquivo: ")
        if not path:
            self.output("❌ Caminho inválido!")
            return
        runner = CommandRunner(
            self.navigator,
            self.show_commands,
            self.pause_on_error,
            self.input_func,
            self.output,
        )
        runner.delay = self.command_delay
        try:
            runner.run_file(path)
        except FileSystemError as exc:
            self.output(f"❌ {exc}")

    def _write_example(self) -> None:
        self.output("\n📝 Criar arquivo de exemplo")
        path = self._read_path("Nome do arquivo a criar: ")
        if not path:
            self.output("❌ Nome inválido!")
            return
        try:
            write_example_script(Path(path))
        except OSError:
            self.output("❌ Erro ao criar arquivo de exemplo")
        else:
            self.output(f"✅ Arquivo de exemplo criado: {path}")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive file-system simulator."""
    parser = argparse.ArgumentParser(
        prog="inodefs", description="Simulador de sistema de arquivos com i-nodes."
    )
    parser.parse_args(argv)
    print("🗄️  Simulador de Sistema de Arquivos")
    print("═══════════════════════════════════════════\n")
    Shell().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())