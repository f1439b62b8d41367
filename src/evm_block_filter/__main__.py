from evm_block_filter.cli import main

main()
